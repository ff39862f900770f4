"""Kernel layer - pure value types shared by joins and runtimes."""

from tandem.kernel.command import Batch, Command, Deliver, Launch
from tandem.kernel.notification import SlotNotification
from tandem.kernel.ports import Operation, Update
from tandem.kernel.result import Failure, Outcome, Success, TerminalOutcome
from tandem.kernel.trace import Evidence, Trace

__all__ = [
    "Outcome",
    "Success",
    "Failure",
    "TerminalOutcome",
    "SlotNotification",
    # Commands
    "Command",
    "Launch",
    "Batch",
    "Deliver",
    # Ports
    "Operation",
    "Update",
    # Tracing
    "Evidence",
    "Trace",
]
