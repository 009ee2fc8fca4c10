# src/task_manager/core/theme.py

from __future__ import annotations

import logging
from enum import StrEnum

from .ports import Preferences
from .write_queue import WriteQueue

logger = logging.getLogger(__name__)

THEME_KEY = "isDark"


class ThemeMode(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class ThemeController:
    """
    Light/dark flag, persisted as a bool independently of the task list.

    set_dark() updates the in-memory mode first and writes in the background,
    so the presentation layer can re-render without waiting for storage.
    """

    def __init__(self, prefs: Preferences) -> None:
        self._prefs = prefs
        self.mode = ThemeMode.LIGHT
        self._writer: WriteQueue[bool] = WriteQueue(self._write_flag, name="theme save")

    @property
    def is_dark(self) -> bool:
        return self.mode == ThemeMode.DARK

    @property
    def writer(self) -> WriteQueue[bool]:
        return self._writer

    async def load(self) -> ThemeMode:
        is_dark = await self._prefs.get_bool(THEME_KEY)
        self.mode = ThemeMode.DARK if is_dark else ThemeMode.LIGHT
        logger.info("Theme loaded mode=%s", self.mode.value)
        return self.mode

    def set_dark(self, is_dark: bool) -> ThemeMode:
        self.mode = ThemeMode.DARK if is_dark else ThemeMode.LIGHT
        self._writer.submit(bool(is_dark))
        return self.mode

    def toggle(self) -> ThemeMode:
        return self.set_dark(not self.is_dark)

    async def flush(self) -> None:
        await self._writer.flush()

    async def _write_flag(self, is_dark: bool) -> bool:
        return await self._prefs.set_bool(THEME_KEY, is_dark)
