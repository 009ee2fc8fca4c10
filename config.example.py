# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/task_manager/config.py for parsing and defaults.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMGR_APP_NAME": "Title shown above the list (default: Task Manager).",
    "TASKMGR_LOG_LEVEL": "Console logging level (default: WARNING; the log file is always DEBUG).",
    # Presentation
    "TASKMGR_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    "TASKMGR_SORT_DESCENDING": "Initial sort High -> Low (true/false, default: true). Not persisted.",
    # Paths (gitignored)
    "TASKMGR_DATA_DIR": "Local data directory (default: .local/task_manager).",
    "TASKMGR_PREFS_DB_PATH": "Preferences SQLite path (default: <data_dir>/prefs.sqlite3).",
    "TASKMGR_LOG_DIR": "Directory for task_manager.log (default: <data_dir>).",
}
