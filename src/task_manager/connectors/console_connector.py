# src/task_manager/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys
import threading
from datetime import datetime

from ..cli.commands import add_task
from ..cli.commands import registry as command_registry
from ..cli.view import render_task_list
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _clear_screen() -> None:
    """Best-effort: only when attached to a terminal."""
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[H\033[2J")
            sys.stdout.flush()
    except OSError:
        pass


def _resolve(fut: asyncio.Future[str], line: str | None, exc: Exception | None) -> None:
    if fut.done():
        return
    if exc is not None:
        fut.set_exception(exc)
    else:
        fut.set_result(line or "")


async def read_line(prompt: str) -> str:
    """
    input() on a daemon thread.

    The event loop keeps running background writes while the user types, and
    a cancelled read (Ctrl+C) leaves the thread behind instead of joining it:
    interpreter exit does not wait for daemon threads.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _reader() -> None:
        try:
            line = input(prompt)
        except Exception as e:  # EOFError, OSError on a closed stdin
            result: tuple[str | None, Exception | None] = (None, e)
        else:
            result = (line, None)
        # The loop may already be closed after a cancelled read.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_resolve, fut, *result)

    threading.Thread(target=_reader, name="console-input", daemon=True).start()
    return await fut


def handle_line(state: AppState, line: str) -> str | None:
    """
    One console input -> reply text (None: nothing to say, just re-render).

    Slash-commands go to the registry; anything else is a new task name.
    """
    text = line.strip()
    if not text:
        return None

    if text.startswith("/"):
        try:
            return command_registry.handle(state, text)
        except Exception:
            logger.exception("Command handler crashed.")
            return "Internal error while handling a command."

    return add_task(state, text)


async def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_store))

    reply: str | None = "Type a task name to add it. Use /help for commands. Use /exit to quit."
    try:
        while True:
            _clear_screen()
            print(render_task_list(state))
            if reply:
                print(f"\n[{_ts_local()}] {reply}")

            try:
                user_input = await read_line(f"\n{PROMPT}")
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break

            if user_input.strip().lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            reply = handle_line(state, user_input)
    except asyncio.CancelledError:
        logger.info("Console cancelled (Ctrl+C), exiting.")
        print()
        raise

    logger.info("Console connector finished.")
