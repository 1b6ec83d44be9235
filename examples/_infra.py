from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure:
    message: str
    line: int | None = None

    def __str__(self) -> str:  # pragma: no cover (examples only)
        where = f"line {self.line}: " if self.line is not None else ""
        return f"{where}{self.message}"


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    age: int


class FakeDirectory:
    """Known user names, looked up with a binary kungfu Result."""

    def __init__(self, *names: str) -> None:
        self._names = set(names)

    def check(self, name: str) -> Result[str, Failure]:
        if name in self._names:
            return Error(Failure(f"{name!r} already exists"))
        return Ok(name)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
