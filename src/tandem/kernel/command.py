"""Commands - inert descriptions of work handed back to the host.

Joins never run anything themselves. Every outward effect is returned as a
Command value; a runtime (see tandem.runtime) or the host's own loop decides
when and how to execute it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from tandem.kernel.ports import Operation
from tandem.kernel.result import Outcome


class Command:
    """Base class for host commands."""

    def launches(self) -> list[Launch]:
        """Flatten into the Launch leaves, in batch order."""
        return [c for c in _leaves(self) if isinstance(c, Launch)]

    def messages(self) -> list[Any]:
        """Flatten into the payloads of Deliver leaves, in batch order."""
        return [c.msg for c in _leaves(self) if isinstance(c, Deliver)]

    @property
    def empty(self) -> bool:
        return not any(True for _ in _leaves(self))

    @staticmethod
    def none() -> Batch:
        return Batch()

    @staticmethod
    def batch(commands: Iterable[Command]) -> Batch:
        return Batch(tuple(commands))


@dataclass(frozen=True)
class Launch(Command):
    """Run one operation once and turn its outcome into a host message.

    Attributes:
        operation: Zero-argument callable returning an awaitable.
        to_msg: Maps the operation's Outcome to the message fed back to the host.
    """

    operation: Operation
    to_msg: Callable[[Outcome[Any, Any]], Any]

    def resolve(self, outcome: Outcome[Any, Any]) -> Any:
        """Build the host message for an outcome without running anything."""
        return self.to_msg(outcome)


@dataclass(frozen=True)
class Batch(Command):
    """Several commands started together, with no ordering between them."""

    commands: tuple[Command, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)


@dataclass(frozen=True)
class Deliver(Command):
    """Zero-delay delivery of a message into the host's message stream."""

    msg: Any


def _leaves(command: Command) -> Iterator[Command]:
    if isinstance(command, Batch):
        for child in command.commands:
            yield from _leaves(child)
    else:
        yield command
