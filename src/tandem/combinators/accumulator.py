"""Accumulator - the pure reducer at the heart of every join."""

from __future__ import annotations

from tandem.combinators.state import JoinState
from tandem.errors import SlotIndexError
from tandem.kernel.notification import SlotNotification
from tandem.kernel.result import Failure, Success, TerminalOutcome


def accumulate(
    state: JoinState,
    notification: SlotNotification,
) -> tuple[JoinState, TerminalOutcome | None]:
    """Apply one slot notification to a join state.

    Semantics:
        - Terminal state (failed or succeeded): returned unchanged, no emission
        - Failure payload: state freezes as failed, emits Failure(error)
        - Success payload: slot is filled; if that completes the join the
          state becomes succeeded and emits Success(values in launch order)

    Pure: performs no IO and calls no callbacks. The same inputs always
    yield the same result.

    Args:
        state: Current join state.
        notification: Outcome of one operation, tagged with its slot index.

    Returns:
        The new state and the terminal outcome emitted by this step, if any.

    Raises:
        SlotIndexError: If the notification addresses a slot outside the join
    """
    if state.is_terminal:
        return state, None
    if not 0 <= notification.index < state.size:
        raise SlotIndexError(notification.index, state.size)

    outcome = notification.outcome
    if not outcome.ok:
        return state.fail(), Failure(outcome.error)

    updated = state.fill(notification.index, outcome.value)
    if updated.complete:
        return updated.succeed(), Success(updated.values())
    return updated, None
