# src/task_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads persisted tasks and theme, then
runs the console REPL until /exit, EOF or Ctrl+C. Pending background writes
are flushed before the process exits.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state, flush_state, load_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _shutdown(state: AppState) -> None:
    """Best-effort shutdown: a failed final write is logged, not raised."""
    try:
        await flush_state(state)
    except Exception:
        logger.exception("Failed to flush state on shutdown.")


async def run(state: AppState) -> None:
    await load_state(state)
    try:
        if getattr(state.settings, "console_enabled", True):
            await run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run.")
    finally:
        await _shutdown(state)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.log_dir, console_level=console_level)
    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        asyncio.run(run(state))
    except KeyboardInterrupt:
        # asyncio.run cancelled run(); its finally has already flushed.
        pass

    logger.info("Bye.")


if __name__ == "__main__":
    main()
