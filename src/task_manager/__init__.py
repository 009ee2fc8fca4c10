"""Single-screen to-do list: prioritized tasks persisted in a local key-value store."""

__version__ = "0.1.0"
