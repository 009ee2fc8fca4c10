# src/task_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Priority, Task
from ..tasks.task_store import TaskStore
from .ports import Preferences
from .theme import ThemeController


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same fields).
    settings: object

    prefs: Preferences
    task_store: TaskStore
    theme: ThemeController

    # Priority given to newly added tasks.
    selected_priority: Priority = Priority.MEDIUM

    # (index, task) awaiting delete confirmation; the task is kept to detect
    # that the list changed before the confirmation arrived.
    pending_delete: tuple[int, Task] | None = None
