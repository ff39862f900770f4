"""Slot and JoinState - the immutable data of one in-flight join."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Literal

from tandem.errors import SlotIndexError

Status = Literal["pending", "succeeded", "failed"]


@dataclass(frozen=True)
class Slot:
    """
    Storage for one operation's result.

    Kinds:
    - not_started: The operation has not been dispatched
    - pending: Dispatched, no outcome yet
    - filled: Succeeded with value
    """

    kind: Literal["not_started", "pending", "filled"]
    value: Any = None

    @staticmethod
    def NotStarted() -> Slot:
        return Slot(kind="not_started")

    @staticmethod
    def Pending() -> Slot:
        return Slot(kind="pending")

    @staticmethod
    def Filled(value: Any) -> Slot:
        return Slot(kind="filled", value=value)

    @property
    def is_filled(self) -> bool:
        return self.kind == "filled"


@dataclass(frozen=True)
class JoinState:
    """Ordered slots of one join plus its lifecycle status.

    Immutable - every transition returns a new instance. The number of
    slots is fixed at construction. Once the status leaves "pending" the
    state is frozen: transitions are the caller's business to avoid, and
    the accumulator never applies them.
    """

    slots: tuple[Slot, ...] = ()
    status: Status = "pending"

    @staticmethod
    def pending(size: int) -> JoinState:
        """All slots dispatched and waiting."""
        return JoinState(slots=(Slot.Pending(),) * size)

    @staticmethod
    def blank(size: int) -> JoinState:
        """All slots not yet dispatched."""
        return JoinState(slots=(Slot.NotStarted(),) * size)

    @property
    def size(self) -> int:
        return len(self.slots)

    @property
    def filled(self) -> int:
        return sum(1 for slot in self.slots if slot.is_filled)

    @property
    def remaining(self) -> int:
        return self.size - self.filled

    @property
    def complete(self) -> bool:
        """True when every slot holds a value."""
        return all(slot.is_filled for slot in self.slots)

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    @property
    def is_failed(self) -> bool:
        return self.status == "failed"

    @property
    def is_succeeded(self) -> bool:
        return self.status == "succeeded"

    @property
    def is_terminal(self) -> bool:
        return self.status != "pending"

    def fill(self, index: int, value: Any) -> JoinState:
        if not 0 <= index < self.size:
            raise SlotIndexError(index, self.size)
        slots = self.slots[:index] + (Slot.Filled(value),) + self.slots[index + 1:]
        return replace(self, slots=slots)

    def fail(self) -> JoinState:
        return replace(self, status="failed")

    def succeed(self) -> JoinState:
        return replace(self, status="succeeded")

    def values(self) -> tuple[Any, ...]:
        """Slot values in launch order.

        Raises:
            ValueError: If any slot is still unfilled
        """
        if not self.complete:
            raise ValueError(f"JoinState has {self.remaining} unfilled slot(s).")
        return tuple(slot.value for slot in self.slots)
