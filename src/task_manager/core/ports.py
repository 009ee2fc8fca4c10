# src/task_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier.
"""

from typing import Protocol


class Preferences(Protocol):
    """
    Durable string/bool key-value store (a "shared preferences" style port).

    All calls are async: the backend may do blocking I/O on a worker thread.
    Writes report success as a bool; they may also raise, callers that
    fire-and-forget must be prepared for both.
    """

    async def get_string(self, key: str) -> str | None: ...
    async def set_string(self, key: str, value: str) -> bool: ...

    async def get_bool(self, key: str) -> bool | None: ...
    async def set_bool(self, key: str, value: bool) -> bool: ...

    async def remove(self, key: str) -> bool: ...
