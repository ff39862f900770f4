"""Outcome values - pure and dependency-free."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Outcome(Generic[T, E]):
    """
    The result of running one operation once.

    Kinds:
    - ok: The operation produced a value
    - err: The operation failed with an error value
    """

    kind: Literal["ok", "err"]
    value: T | None = None
    error: E | None = None

    @staticmethod
    def Ok(value: Any) -> Outcome[Any, Any]:
        return Outcome(kind="ok", value=value)

    @staticmethod
    def Err(error: Any) -> Outcome[Any, Any]:
        return Outcome(kind="err", error=error)

    @property
    def ok(self) -> bool:
        return self.kind == "ok"


@dataclass(frozen=True)
class Success:
    """Terminal outcome of a join whose every slot was filled.

    Attributes:
        values: Slot values in launch order.
    """

    values: tuple[Any, ...]


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Terminal outcome of a join that received a failure first."""

    error: E


TerminalOutcome = Success | Failure
