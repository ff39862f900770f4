"""Combinators layer - all-or-first-error joins over concurrent operations."""

from tandem.combinators.accumulator import accumulate
from tandem.combinators.api import (
    join,
    join_list,
    join_list_then,
    join_then,
    update,
    update_join,
    update_join_list,
)
from tandem.combinators.dispatch import dispatch
from tandem.combinators.handle import Join, ListJoin
from tandem.combinators.router import Continuation, Router, Step, deliver
from tandem.combinators.state import JoinState, Slot

__all__ = [
    # Entry points
    "join",
    "join_list",
    "join_then",
    "join_list_then",
    "update",
    "update_join",
    "update_join_list",
    # Handles
    "Join",
    "ListJoin",
    # Building blocks
    "JoinState",
    "Slot",
    "accumulate",
    "dispatch",
    "Router",
    "Continuation",
    "Step",
    "deliver",
]
