from .combinators import (
    Join,
    JoinState,
    ListJoin,
    Slot,
    join,
    join_list,
    join_list_then,
    join_then,
    update,
    update_join,
    update_join_list,
)
from .errors import JoinError, OperationFailed, RuntimeLimitError, SlotIndexError
from .kernel import (
    Batch,
    Command,
    Deliver,
    Failure,
    Launch,
    Outcome,
    SlotNotification,
    Success,
    Trace,
)
from .runtime import RunReport, Runtime, RuntimeConfig, attempt, attempt_list

__all__ = [
    # Joins
    "join",
    "join_list",
    "join_then",
    "join_list_then",
    "update",
    "update_join",
    "update_join_list",
    "Join",
    "ListJoin",
    "JoinState",
    "Slot",
    # Values
    "Outcome",
    "Success",
    "Failure",
    "SlotNotification",
    "Command",
    "Launch",
    "Batch",
    "Deliver",
    # Errors
    "JoinError",
    "OperationFailed",
    "SlotIndexError",
    "RuntimeLimitError",
    # Runtime
    "Runtime",
    "RuntimeConfig",
    "RunReport",
    "attempt",
    "attempt_list",
    # Tracing
    "Trace",
]
