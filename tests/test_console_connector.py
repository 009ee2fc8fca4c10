# tests/test_console_connector.py

from __future__ import annotations

import asyncio
import json
import threading

import pytest

from task_manager.cli.main import run
from task_manager.connectors.console_connector import run_console_loop
from task_manager.tasks.task_store import TASKS_KEY


def _scripted_input(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.mark.asyncio
async def test_loop_adds_and_completes_until_exit(state, prefs, monkeypatch: pytest.MonkeyPatch) -> None:
    _scripted_input(monkeypatch, ["Buy milk", "/done 1", "/exit", "never read"])

    await run_console_loop(state)
    await state.task_store.flush()

    assert [(t.name, t.completed) for t in state.task_store.tasks] == [("Buy milk", True)]
    assert json.loads(prefs.strings[TASKS_KEY])[0]["completed"] is True


@pytest.mark.asyncio
async def test_loop_ends_on_eof(state, monkeypatch: pytest.MonkeyPatch) -> None:
    _scripted_input(monkeypatch, ["one"])

    await run_console_loop(state)

    assert [t.name for t in state.task_store.tasks] == ["one"]


@pytest.mark.asyncio
async def test_cancel_during_blocked_read_still_flushes(state, prefs, monkeypatch: pytest.MonkeyPatch) -> None:
    reading = threading.Event()
    release = threading.Event()
    lines = iter(["Pay rent"])

    def fake_input(prompt: str = "") -> str:
        for line in lines:
            return line
        reading.set()
        release.wait()
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    state.settings.console_enabled = True

    task = asyncio.create_task(run(state))
    try:
        while not reading.is_set():
            await asyncio.sleep(0.01)

        task.cancel()
        # The reader thread is still blocked; cancellation must not wait on it.
        with pytest.raises(asyncio.CancelledError):
            await asyncio.wait_for(task, timeout=2)
    finally:
        release.set()

    assert [t.name for t in state.task_store.tasks] == ["Pay rent"]
    assert "Pay rent" in prefs.strings[TASKS_KEY]
