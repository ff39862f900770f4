"""Tagged progress notifications addressed to a join."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tandem.kernel.result import Outcome


@dataclass(frozen=True)
class SlotNotification:
    """Outcome of one operation, tagged with the slot it belongs to.

    Attributes:
        join_id: Identifier of the join that launched the operation.
        index: Launch position of the operation within that join.
        outcome: What the operation produced.
    """

    join_id: int
    index: int
    outcome: Outcome[Any, Any]

    @property
    def failed(self) -> bool:
        return not self.outcome.ok
