# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_manager.cli.bootstrap import create_initial_state
from task_manager.core.state import AppState

from .fakes import FakePreferences


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Test Tasks",
        log_level="DEBUG",
        console_enabled=False,
        sort_descending=True,
        data_dir=tmp_path,
        prefs_db_path=tmp_path / "prefs.sqlite3",
        log_dir=tmp_path,
    )


@pytest.fixture()
def prefs() -> FakePreferences:
    return FakePreferences()


@pytest.fixture()
def state(settings: SimpleNamespace, prefs: FakePreferences) -> AppState:
    """AppState wired with the in-memory preferences fake."""
    return create_initial_state(settings=settings, prefs=prefs)
