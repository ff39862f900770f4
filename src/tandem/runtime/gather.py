"""Awaitable facade: run a join and return its values or raise."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from tandem.combinators.api import join, join_list
from tandem.combinators.handle import Join
from tandem.errors import OperationFailed
from tandem.kernel.command import Command
from tandem.kernel.notification import SlotNotification
from tandem.kernel.ports import Operation
from tandem.kernel.result import Outcome
from tandem.runtime.config import RuntimeConfig
from tandem.runtime.loop import Runtime


@dataclass(frozen=True)
class _Progress:
    notification: SlotNotification


@dataclass(frozen=True)
class _Settled:
    outcome: Outcome[Any, Any]


@dataclass(frozen=True)
class _Host:
    handle: Join | None = None
    outcome: Outcome[Any, Any] | None = None
    failed_index: int | None = None


def _update(host: _Host, msg: Any) -> tuple[_Host, Command]:
    if isinstance(msg, _Progress):
        if host.handle is None:
            raise RuntimeError("progress message received before the join started")
        note = msg.notification
        if note.failed and host.handle.is_pending and host.failed_index is None:
            host = replace(host, failed_index=note.index)
        handle, command = host.handle.update(note)
        return replace(host, handle=handle), command
    if isinstance(msg, _Settled):
        return replace(host, outcome=msg.outcome), Command.none()
    raise TypeError(f"Unexpected message: {msg!r}")


async def _settle(handle: Join, command: Command, config: RuntimeConfig | None) -> Any:
    runtime = Runtime(_update, config)
    report = await runtime.run(
        _Host(handle=handle),
        command,
        until=lambda host: host.outcome is not None,
    )
    outcome = report.model.outcome
    if outcome is None:
        raise RuntimeError("run stopped before the join reached an outcome")
    if outcome.ok:
        return outcome.value
    error = outcome.error
    failure = OperationFailed(error, index=report.model.failed_index)
    if isinstance(error, BaseException):
        raise failure from error
    raise failure


async def attempt(*operations: Operation[Any], config: RuntimeConfig | None = None) -> tuple[Any, ...]:
    """Run operations concurrently and return their values in launch order.

    Raises:
        OperationFailed: Carrying the first failure, raised as soon as it
            arrives. Remaining operations keep running in the background
            and are not cancelled.
    """
    handle, command = join(
        *operations,
        on_progress=_Progress,
        on_success=lambda *values: _Settled(Outcome.Ok(values)),
        on_failure=lambda error: _Settled(Outcome.Err(error)),
    )
    return await _settle(handle, command, config)


async def attempt_list(
    operations: Sequence[Operation[Any]],
    config: RuntimeConfig | None = None,
) -> list[Any]:
    """List form of attempt."""
    handle, command = join_list(
        operations,
        on_progress=_Progress,
        on_success=lambda values: _Settled(Outcome.Ok(values)),
        on_failure=lambda error: _Settled(Outcome.Err(error)),
    )
    return await _settle(handle, command, config)
