"""Dispatcher - launches every operation of a join up front."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Sequence
from typing import Any

from tandem.combinators.state import JoinState
from tandem.kernel.command import Batch, Command, Launch
from tandem.kernel.notification import SlotNotification
from tandem.kernel.ports import Operation
from tandem.kernel.result import Outcome

OnProgress = Callable[[SlotNotification], Any]

_join_ids = itertools.count(1)


def next_join_id() -> int:
    """Allocate a process-unique join identifier."""
    return next(_join_ids)


def dispatch(
    operations: Sequence[Operation[Any]],
    on_progress: OnProgress,
) -> tuple[int, JoinState, Command]:
    """Fire all operations of a new join.

    Semantics:
        - Allocate a join id that tags every notification of this join
        - Start with every slot pending
        - One Launch per operation, batched, never sequenced
        - Launch i reports on_progress(SlotNotification(join_id, i, outcome))

    Dispatch cannot fail: an operation's failure arrives later as an
    ordinary Outcome.Err notification.

    Args:
        operations: Operations in launch order.
        on_progress: Host message constructor for progress notifications.

    Returns:
        The join id, the initial state, and the batch of launches.
    """
    join_id = next_join_id()
    launches = tuple(
        Launch(operation=op, to_msg=_tagger(join_id, index, on_progress))
        for index, op in enumerate(operations)
    )
    return join_id, JoinState.pending(len(launches)), Batch(launches)


def _tagger(
    join_id: int,
    index: int,
    on_progress: OnProgress,
) -> Callable[[Outcome[Any, Any]], Any]:
    def to_msg(outcome: Outcome[Any, Any]) -> Any:
        return on_progress(SlotNotification(join_id=join_id, index=index, outcome=outcome))

    return to_msg
