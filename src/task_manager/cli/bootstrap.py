# src/task_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the concrete preferences store into AppState,
- loads persisted state at startup and flushes it at shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Preferences
from ..core.state import AppState
from ..core.theme import ThemeController
from ..prefs.store import SQLitePreferences
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.prefs_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, prefs: Preferences | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the preferences store) injectable makes the app easier
    to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if prefs is None:
        _ensure_local_dirs(settings)
        prefs = SQLitePreferences(settings.prefs_db_path)

    return AppState(
        settings=settings,
        prefs=prefs,
        task_store=TaskStore(prefs, sort_descending=getattr(settings, "sort_descending", True)),
        theme=ThemeController(prefs),
    )


async def load_state(state: AppState) -> None:
    """Read persisted tasks and theme. Bad stored data never aborts startup."""
    await state.task_store.load()
    await state.theme.load()
    logger.info(
        "State loaded tasks=%d theme=%s", len(state.task_store), state.theme.mode.value
    )


async def flush_state(state: AppState) -> None:
    """Wait for background writes so the last state reaches storage."""
    await state.task_store.flush()
    await state.theme.flush()

    for name, writer in (("tasks", state.task_store.writer), ("theme", state.theme.writer)):
        if writer.last_error is not None:
            logger.warning("Last %s write failed: %s", name, writer.last_error)
