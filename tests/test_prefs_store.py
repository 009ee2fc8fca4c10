# tests/test_prefs_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_manager.prefs.store import SQLitePreferences


@pytest.mark.asyncio
async def test_string_and_bool_round_trip(tmp_path: Path) -> None:
    prefs = SQLitePreferences(tmp_path / "prefs.sqlite3")

    assert await prefs.get_string("tasks_v1") is None
    assert await prefs.get_bool("isDark") is None

    assert await prefs.set_string("tasks_v1", '[{"name":"ü"}]') is True
    assert await prefs.set_bool("isDark", True) is True

    assert await prefs.get_string("tasks_v1") == '[{"name":"ü"}]'
    assert await prefs.get_bool("isDark") is True

    assert await prefs.set_bool("isDark", False) is True
    assert await prefs.get_bool("isDark") is False


@pytest.mark.asyncio
async def test_values_survive_reopen(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "prefs.sqlite3"
    await SQLitePreferences(db).set_string("k", "v")

    reopened = SQLitePreferences(db)
    assert await reopened.get_string("k") == "v"


@pytest.mark.asyncio
async def test_type_mismatch_reads_as_absent(tmp_path: Path) -> None:
    prefs = SQLitePreferences(tmp_path / "prefs.sqlite3")
    await prefs.set_bool("flag", True)
    await prefs.set_string("text", "1")

    assert await prefs.get_string("flag") is None
    assert await prefs.get_bool("text") is None


@pytest.mark.asyncio
async def test_remove(tmp_path: Path) -> None:
    prefs = SQLitePreferences(tmp_path / "prefs.sqlite3")
    await prefs.set_string("k", "v")

    assert await prefs.remove("k") is True
    assert await prefs.get_string("k") is None
    # Removing a missing key is not an error.
    assert await prefs.remove("k") is True
