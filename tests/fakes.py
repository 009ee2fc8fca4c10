# tests/fakes.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field


@dataclass(slots=True)
class PrefWrite:
    key: str
    value: str | bool


@dataclass(slots=True)
class FakePreferences:
    """
    In-memory Preferences used by unit tests.

    - Captures every write for assertions
    - `fail_writes` makes writes report failure, `raise_on_write` makes them raise
    - `write_delay` keeps a write "in flight" so tests can overlap mutations
    """

    strings: dict[str, str] = field(default_factory=dict)
    bools: dict[str, bool] = field(default_factory=dict)
    writes: list[PrefWrite] = field(default_factory=list)
    fail_writes: bool = False
    raise_on_write: Exception | None = None
    write_delay: float = 0.0

    async def get_string(self, key: str) -> str | None:
        return self.strings.get(key)

    async def set_string(self, key: str, value: str) -> bool:
        return await self._write(key, value)

    async def get_bool(self, key: str) -> bool | None:
        return self.bools.get(key)

    async def set_bool(self, key: str, value: bool) -> bool:
        return await self._write(key, value)

    async def remove(self, key: str) -> bool:
        self.strings.pop(key, None)
        self.bools.pop(key, None)
        return True

    async def _write(self, key: str, value: str | bool) -> bool:
        if self.write_delay:
            await asyncio.sleep(self.write_delay)
        if self.raise_on_write is not None:
            raise self.raise_on_write
        self.writes.append(PrefWrite(key=key, value=value))
        if self.fail_writes:
            return False
        if isinstance(value, bool):
            self.bools[key] = value
        else:
            self.strings[key] = value
        return True

    def writes_for(self, key: str) -> list[str | bool]:
        return [w.value for w in self.writes if w.key == key]
