"""Tagged results returned by the parsing helpers instead of raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: str
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False


Result = Ok[T] | Err
