# src/task_manager/tasks/task_models.py

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """
    Task priority.

    Declaration order matters: the persisted form is the ordinal
    (HIGH=0, MEDIUM=1, LOW=2), the sort key is the weight (HIGH=3 ... LOW=1).
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def weight(self) -> int:
        return _WEIGHTS[self]

    @property
    def ordinal(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def from_ordinal(cls, raw: Any) -> Priority:
        """Tolerant decode of a persisted ordinal; anything unusable means MEDIUM."""
        # bool is an int subclass, but `true` is not an ordinal.
        if isinstance(raw, bool) or not isinstance(raw, int):
            return cls.MEDIUM
        if 0 <= raw < len(_ORDER):
            return _ORDER[raw]
        return cls.MEDIUM

    @classmethod
    def parse(cls, raw: str | None) -> Priority | None:
        """User input lookup: 'high', 'High', 'h' ... Returns None when unknown."""
        if not raw:
            return None
        s = raw.strip().lower()
        for p in _ORDER:
            if s in (p.value, p.value[0]):
                return p
        return None


_ORDER: tuple[Priority, ...] = tuple(Priority)
_LABELS = {Priority.HIGH: "High", Priority.MEDIUM: "Medium", Priority.LOW: "Low"}
_WEIGHTS = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


@dataclass(slots=True)
class Task:
    name: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "completed": self.completed,
            "priority": self.priority.ordinal,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Task:
        """
        Tolerant decode of one persisted record.

        Missing (or null) fields fall back to defaults. A field that is present
        with the wrong JSON type is treated as malformed data (TypeError).
        """
        name = record.get("name")
        if name is None:
            name = ""
        elif not isinstance(name, str):
            raise TypeError(f"task name must be a string, got {type(name).__name__}")

        completed = record.get("completed")
        if completed is None:
            completed = False
        elif not isinstance(completed, bool):
            raise TypeError(f"task completed must be a boolean, got {type(completed).__name__}")

        return cls(
            name=name,
            completed=completed,
            priority=Priority.from_ordinal(record.get("priority")),
        )


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """
    Outcome of decoding a persisted task list.

    fallback=True means the payload was unusable and `tasks` is the empty
    recovery value, not real data.
    """

    tasks: list[Task] = field(default_factory=list)
    fallback: bool = False
    error: str | None = None


def encode_task_list(tasks: Iterable[Task]) -> str:
    return json.dumps(
        [t.to_record() for t in tasks],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def decode_task_list(raw: str | None) -> DecodeResult:
    """Decode a persisted task list. Never raises; see DecodeResult."""
    if raw is None:
        return DecodeResult()

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        return DecodeResult(fallback=True, error=f"invalid JSON: {e}")

    if not isinstance(data, list):
        return DecodeResult(fallback=True, error=f"expected a list, got {type(data).__name__}")

    tasks: list[Task] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            return DecodeResult(
                fallback=True,
                error=f"item {i}: expected an object, got {type(item).__name__}",
            )
        try:
            tasks.append(Task.from_record(item))
        except TypeError as e:
            return DecodeResult(fallback=True, error=f"item {i}: {e}")

    return DecodeResult(tasks=tasks)
