# src/task_manager/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.ports import Preferences
from ..core.write_queue import WriteQueue
from .task_models import DecodeResult, Priority, Task, decode_task_list, encode_task_list

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks_v1"


class TaskStore:
    """
    In-memory task list with write-through persistence.

    Ordering:
    - `tasks` is always the result of the last sort; it carries no meaning
      of its own (no ids, position is the only identity)
    - sort key: priority weight (direction = sort_descending), then the
      case-insensitive name, always ascending

    Persistence:
    - mutators are synchronous and return immediately
    - each successful mutation encodes a snapshot and hands it to a
      WriteQueue (one write in flight, latest snapshot wins)
    - the sort direction is session state and is never persisted

    Indexes passed to mutators refer to the most recent `tasks` snapshot and
    are invalidated by any mutation.
    """

    def __init__(self, prefs: Preferences, *, sort_descending: bool = True) -> None:
        self._prefs = prefs
        self._tasks: list[Task] = []
        self.sort_descending = sort_descending
        self._writer: WriteQueue[str] = WriteQueue(self._write_payload, name="TaskStore save")

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def writer(self) -> WriteQueue[str]:
        return self._writer

    # ---- load / save ----

    async def load(self) -> DecodeResult:
        raw = await self._prefs.get_string(TASKS_KEY)
        result = decode_task_list(raw)

        if result.fallback:
            logger.warning("Stored task list is unreadable, starting empty: %s", result.error)

        self._tasks = list(result.tasks)
        self._apply_sort()
        logger.info("TaskStore loaded tasks=%d", len(self._tasks))
        return result

    async def save(self) -> None:
        """Write the current list and wait for it (the mutators don't wait)."""
        self._schedule_save()
        await self._writer.flush()

    async def flush(self) -> None:
        await self._writer.flush()

    def _schedule_save(self) -> None:
        self._writer.submit(encode_task_list(self._tasks))

    async def _write_payload(self, payload: str) -> bool:
        return await self._prefs.set_string(TASKS_KEY, payload)

    # ---- mutators ----

    def add(self, name: str, priority: Priority = Priority.MEDIUM) -> bool:
        """Append a task. A blank name is rejected: returns False, nothing is written."""
        text = (name or "").strip()
        if not text:
            logger.debug("add rejected: blank name")
            return False

        self._tasks.append(Task(name=text, completed=False, priority=priority))
        self._apply_sort()
        self._schedule_save()
        logger.debug("Task added priority=%s total=%d", priority.value, len(self._tasks))
        return True

    def set_completed(self, index: int, value: bool) -> None:
        # Completion is not a sort key: no re-sort.
        self._tasks[self._check_index(index)].completed = bool(value)
        self._schedule_save()

    def delete(self, index: int) -> Task:
        # Removal keeps the remaining elements sorted.
        task = self._tasks.pop(self._check_index(index))
        self._schedule_save()
        logger.debug("Task deleted index=%d total=%d", index, len(self._tasks))
        return task

    def set_priority(self, index: int, priority: Priority) -> None:
        self._tasks[self._check_index(index)].priority = priority
        self._apply_sort()
        self._schedule_save()

    def toggle_sort_order(self) -> bool:
        self.sort_descending = not self.sort_descending
        self._apply_sort()
        return self.sort_descending

    def _check_index(self, index: int) -> int:
        # Negative indexes would silently address from the end.
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index out of range: {index}")
        return index

    # ---- sorting ----

    def _apply_sort(self) -> None:
        sign = -1 if self.sort_descending else 1
        self._tasks.sort(key=lambda t: (sign * t.priority.weight, t.name.lower()))
