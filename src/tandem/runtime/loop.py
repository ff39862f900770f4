"""Asyncio runtime - executes commands and serializes their messages."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from tandem.errors import RuntimeLimitError
from tandem.kernel.command import Batch, Command, Deliver, Launch
from tandem.kernel.ports import Update
from tandem.kernel.result import Outcome
from tandem.kernel.trace import Trace
from tandem.runtime.config import RuntimeConfig

logger = logging.getLogger(__name__)

M = TypeVar("M")

# Strong references to operations left running after their run returned.
_background: set[asyncio.Task[None]] = set()


@dataclass(frozen=True)
class RunReport(Generic[M]):
    """What a run ended with.

    Attributes:
        model: The host model after the last processed message.
        messages: Number of messages passed to update.
        dropped: Messages queued but not processed when the run stopped.
        detached: Operations still running when the run stopped.
        trace: Recorded events, when tracing is enabled.
    """

    model: M
    messages: int
    dropped: int = 0
    detached: int = 0
    trace: Trace | None = None


@dataclass(frozen=True)
class _Crash:
    exc: BaseException


@dataclass
class _Session:
    queue: asyncio.Queue[Any]
    semaphore: asyncio.Semaphore | None
    tasks: set[asyncio.Task[None]] = field(default_factory=set)
    outstanding: int = 0


class Runtime(Generic[M]):
    """Single-threaded message loop for a host model.

    Semantics:
        - Launch: the operation runs as an asyncio task; its outcome message
          is queued when it finishes
        - Deliver: the message is queued immediately
        - Batch: children are started together, in order
        - Messages are applied one at a time through update

    Operations are never cancelled. When a run stops early, operations
    still running are left to finish in the background and their messages
    are dropped; settle() waits for them.
    """

    def __init__(self, update: Update[M], config: RuntimeConfig | None = None) -> None:
        self._update = update
        self.config = config or RuntimeConfig()
        self._detached: set[asyncio.Task[None]] = set()

    @property
    def detached(self) -> int:
        """Operations from earlier runs that are still running."""
        return len(self._detached)

    async def settle(self) -> None:
        """Wait for operations left running by earlier runs."""
        while self._detached:
            await asyncio.gather(*self._detached, return_exceptions=True)

    async def run(
        self,
        model: M,
        command: Command | None = None,
        until: Callable[[M], bool] | None = None,
    ) -> RunReport[M]:
        """Run until until(model) holds or nothing is left to do.

        Returns as soon as the run stops; it does not wait for operations
        whose messages can no longer matter.

        Args:
            model: Initial host model.
            command: Commands to start with, typically a join's launches.
            until: Stop condition checked after every update.

        Returns:
            RunReport with the final model.

        Raises:
            RuntimeLimitError: More than config.max_messages were processed.
            BaseException: An operation raised something outside config.catch.
        """
        trace = Trace() if self.config.trace else None
        limit = self.config.max_concurrency
        session = _Session(
            queue=asyncio.Queue(),
            semaphore=asyncio.Semaphore(limit) if limit else None,
        )
        run_id = trace.record("run") if trace is not None else None
        if trace is not None and run_id is not None:
            trace.push(run_id)

        processed = 0
        try:
            if command is not None:
                self._execute(command, session, trace)

            while until is None or not until(model):
                if session.queue.empty() and session.outstanding == 0:
                    break
                msg = await session.queue.get()
                if isinstance(msg, _Crash):
                    raise msg.exc

                processed += 1
                if self.config.max_messages is not None and processed > self.config.max_messages:
                    raise RuntimeLimitError(
                        f"processed more than {self.config.max_messages} messages"
                    )

                start_time = time.perf_counter()
                model, follow_up = self._update(model, msg)
                if trace is not None:
                    trace.record(
                        "update",
                        info={"msg": type(msg).__name__},
                        duration_ms=(time.perf_counter() - start_time) * 1000,
                    )
                self._execute(follow_up, session, trace)
        finally:
            dropped, detached = self._detach(session)
            if trace is not None:
                trace.pop()
                trace.record(
                    "run_end",
                    info={"messages": processed, "dropped": dropped, "detached": detached},
                )

        return RunReport(
            model=model,
            messages=processed,
            dropped=dropped,
            detached=detached,
            trace=trace,
        )

    def _execute(self, command: Command, session: _Session, trace: Trace | None) -> None:
        if isinstance(command, Batch):
            for child in command.commands:
                self._execute(child, session, trace)
        elif isinstance(command, Deliver):
            if trace is not None:
                trace.record("deliver", info={"msg": type(command.msg).__name__})
            session.queue.put_nowait(command.msg)
        elif isinstance(command, Launch):
            event_id = trace.record("launch") if trace is not None else None
            session.outstanding += 1
            task = asyncio.create_task(self._perform(command, session, trace, event_id))
            session.tasks.add(task)
            task.add_done_callback(session.tasks.discard)
        else:
            raise TypeError(f"Unknown command: {command!r}")

    async def _perform(
        self,
        launch: Launch,
        session: _Session,
        trace: Trace | None,
        event_id: int | None,
    ) -> None:
        start_time = time.perf_counter()
        try:
            try:
                async with session.semaphore or nullcontext():
                    value = await launch.operation()
                outcome = Outcome.Ok(value)
            except self.config.catch as exc:
                outcome = Outcome.Err(exc)

            if trace is not None:
                trace.record(
                    "settled",
                    info={"kind": outcome.kind},
                    parent_id=event_id,
                    duration_ms=(time.perf_counter() - start_time) * 1000,
                )
            msg: Any = launch.resolve(outcome)
        except BaseException as exc:
            logger.debug("operation raised uncaught %s", type(exc).__name__)
            _report(session, _Crash(exc))
            if isinstance(exc, asyncio.CancelledError) and _cancelling():
                raise
            return
        _report(session, msg)

    def _detach(self, session: _Session) -> tuple[int, int]:
        # Messages already queued can no longer reach update.
        dropped = 0
        while not session.queue.empty():
            session.queue.get_nowait()
            dropped += 1
        if dropped:
            logger.debug("dropped %d message(s) after run stopped", dropped)

        running = [task for task in session.tasks if not task.done()]
        for task in running:
            self._detached.add(task)
            _background.add(task)
            task.add_done_callback(self._detached.discard)
            task.add_done_callback(_background.discard)
        if running:
            logger.debug("leaving %d operation(s) running", len(running))
        return dropped, len(running)


def _report(session: _Session, msg: Any) -> None:
    session.outstanding -= 1
    session.queue.put_nowait(msg)


def _cancelling() -> bool:
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0
