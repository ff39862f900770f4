"""Join handles - opaque join state plus its routing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from tandem.combinators.accumulator import accumulate
from tandem.combinators.router import Router
from tandem.combinators.state import JoinState
from tandem.kernel.command import Command
from tandem.kernel.notification import SlotNotification
from tandem.kernel.result import Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Join:
    """An in-flight join of a fixed number of operations.

    Store the handle, feed it every notification produced by its launches
    through update(), and forward the returned commands. On success the
    values are passed to the success continuation as positional arguments
    in launch order.

    The fields are internal; use the properties and update().
    """

    _id: int
    _state: JoinState
    _router: Router
    _stage: int = 1

    @property
    def id(self) -> int:
        return self._id

    @property
    def state(self) -> JoinState:
        return self._state

    @property
    def stage(self) -> int:
        """1 for a first join, incremented for each chained stage."""
        return self._stage

    @property
    def size(self) -> int:
        return self._state.size

    @property
    def is_pending(self) -> bool:
        return self._state.is_pending

    @property
    def is_failed(self) -> bool:
        return self._state.is_failed

    @property
    def is_succeeded(self) -> bool:
        return self._state.is_succeeded

    def notify(self, index: int, outcome: Outcome[Any, Any]) -> SlotNotification:
        """Build a notification addressed to one of this join's slots."""
        return SlotNotification(join_id=self._id, index=index, outcome=outcome)

    def owns(self, notification: SlotNotification) -> bool:
        return notification.join_id == self._id

    def update(self, notification: SlotNotification) -> tuple[Join, Command]:
        """Apply one notification.

        Semantics:
            - Notification for another join: ignored
            - Terminal join: ignored (at most one emission per join)
            - Failure: handle freezes, failure message delivered
            - Last slot filled: success continuation runs; if it starts a
              next stage, that stage replaces this handle

        Returns:
            The handle to store from now on and the command to forward.
        """
        if not self.owns(notification):
            logger.debug(
                "join %d ignoring notification addressed to join %d",
                self._id,
                notification.join_id,
            )
            return self, Command.none()

        if self._state.is_terminal:
            logger.debug(
                "join %d is %s, dropping outcome for slot %d",
                self._id,
                self._state.status,
                notification.index,
            )
            return self, Command.none()

        state, outcome = accumulate(self._state, notification)
        current = replace(self, _state=state)
        if outcome is None:
            return current, Command.none()

        following, command = self._router.route(outcome)
        if following is None:
            return current, command
        return following.chained_after(self), command

    def chained_after(self, previous: Join) -> Join:
        return replace(self, _stage=previous.stage + self._stage)


@dataclass(frozen=True)
class ListJoin(Join):
    """An in-flight join over a homogeneous list of operations.

    Identical to Join except that the success continuation receives one
    list of values in the original list order.
    """
