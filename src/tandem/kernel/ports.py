"""Port protocols for tandem - pure abstractions."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from tandem.kernel.command import Command

T_co = TypeVar("T_co", covariant=True)
M = TypeVar("M")


class Operation(Protocol[T_co]):
    """
    One unit of asynchronous work.
    Called exactly once; never retried or cancelled by tandem.
    A raised exception is the operation's failure value.
    """

    def __call__(self) -> Awaitable[T_co]: ...


class Update(Protocol[M]):
    """Host reducer: applies one message and returns follow-up commands."""

    def __call__(self, model: M, msg: Any) -> tuple[M, Command]: ...
