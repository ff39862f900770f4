from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from tandem import Command, Join, Outcome, SlotNotification


class NetworkError(Exception):
    pass


@dataclass(frozen=True)
class Progress:
    notification: SlotNotification


@dataclass(frozen=True)
class Done:
    values: Any


@dataclass(frozen=True)
class Failed:
    error: Any


def done(*values: Any) -> Done:
    return Done(values)


def done_list(values: list[Any]) -> Done:
    return Done(values)


def returning(value: Any, delay: float = 0.0):
    async def op() -> Any:
        await asyncio.sleep(delay)
        return value

    return op


def raising(error: BaseException, delay: float = 0.0):
    async def op() -> Any:
        await asyncio.sleep(delay)
        raise error

    return op


async def never_called() -> Any:
    raise AssertionError("operation should not run in a manual test")


@dataclass
class ManualHost:
    """Drives a join by hand: outcomes are fed in a chosen order.

    Nothing is executed. Each Launch in the current command is resolved
    with the outcome the test supplies, and every Deliver is collected.
    """

    handle: Join
    launches: list[Any] = field(default_factory=list)
    delivered: list[Any] = field(default_factory=list)

    @classmethod
    def start(cls, started: tuple[Join, Command]) -> ManualHost:
        handle, command = started
        host = cls(handle=handle)
        host._absorb(command)
        return host

    def _absorb(self, command: Command) -> None:
        self.launches = command.launches() or self.launches
        self.delivered.extend(command.messages())

    def resolve(self, index: int, outcome: Outcome[Any, Any]) -> list[Any]:
        """Report an outcome for launch index of the current stage.

        Returns the messages delivered by this step.
        """
        msg = self.launches[index].resolve(outcome)
        assert isinstance(msg, Progress)
        before = len(self.delivered)
        self.handle, command = self.handle.update(msg.notification)
        self._absorb(command)
        return self.delivered[before:]

    def resolve_all(self, outcomes: Iterable[tuple[int, Outcome[Any, Any]]]) -> list[Any]:
        for index, outcome in outcomes:
            self.resolve(index, outcome)
        return list(self.delivered)


@dataclass(frozen=True)
class Model:
    """Host model used with tandem.Runtime in tests."""

    handle: Join | None = None
    results: tuple[Any, ...] = ()

    @property
    def finished(self) -> bool:
        return bool(self.results)


def host_update(model: Model, msg: Any) -> tuple[Model, Command]:
    if isinstance(msg, Progress):
        assert model.handle is not None
        handle, command = model.handle.update(msg.notification)
        return replace(model, handle=handle), command
    return replace(model, results=model.results + (msg,)), Command.none()
