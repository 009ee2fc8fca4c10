# tests/test_bootstrap.py

from __future__ import annotations

import pytest

from task_manager.cli.bootstrap import create_initial_state, flush_state, load_state
from task_manager.cli.main import run
from task_manager.config import Settings
from task_manager.core.theme import ThemeMode
from task_manager.prefs.store import SQLitePreferences
from task_manager.tasks.task_models import Priority


@pytest.mark.asyncio
async def test_state_round_trip_through_sqlite(settings) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.prefs, SQLitePreferences)

    await load_state(state)
    state.task_store.add("Pay rent", Priority.HIGH)
    state.task_store.add("Water plants", Priority.LOW)
    state.task_store.set_completed(1, True)
    state.theme.set_dark(True)
    await flush_state(state)

    again = create_initial_state(settings=settings)
    await load_state(again)

    assert [(t.name, t.completed, t.priority) for t in again.task_store.tasks] == [
        ("Pay rent", False, Priority.HIGH),
        ("Water plants", True, Priority.LOW),
    ]
    assert again.theme.mode is ThemeMode.DARK


@pytest.mark.asyncio
async def test_corrupt_store_does_not_abort_startup(settings) -> None:
    prefs = SQLitePreferences(settings.prefs_db_path)
    await prefs.set_string("tasks_v1", "{broken")

    state = create_initial_state(settings=settings)
    await load_state(state)

    assert state.task_store.tasks == ()


@pytest.mark.asyncio
async def test_run_without_console_loads_and_flushes(state, prefs) -> None:
    prefs.strings["tasks_v1"] = '[{"name":"b","completed":false,"priority":2},{"name":"a"}]'

    await run(state)

    assert [t.name for t in state.task_store.tasks] == ["a", "b"]


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("TASKMGR_APP_NAME", "My Tasks")
    monkeypatch.setenv("TASKMGR_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKMGR_SORT_DESCENDING", "no")
    monkeypatch.delenv("TASKMGR_PREFS_DB_PATH", raising=False)
    monkeypatch.delenv("TASKMGR_LOG_DIR", raising=False)

    s = Settings.from_env()

    assert s.app_name == "My Tasks"
    assert s.sort_descending is False
    assert s.prefs_db_path == tmp_path / "prefs.sqlite3"
    assert s.log_dir == tmp_path


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in ("APP_NAME", "LOG_LEVEL", "SORT_DESCENDING", "CONSOLE_ENABLED", "DATA_DIR"):
        monkeypatch.delenv(f"TASKMGR_{suffix}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "Task Manager"
    assert s.log_level == "WARNING"
    assert s.sort_descending is True
    assert s.console_enabled is True


@pytest.mark.asyncio
async def test_run_with_sqlite_prefs_shuts_down_cleanly(settings) -> None:
    first = create_initial_state(settings=settings)
    first.task_store.add("Call mom", Priority.MEDIUM)
    await flush_state(first)

    state = create_initial_state(settings=settings)
    await run(state)

    assert [t.name for t in state.task_store.tasks] == ["Call mom"]
    assert state.task_store.writer.busy is False
    assert state.task_store.writer.has_pending is False
