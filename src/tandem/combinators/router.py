"""Terminal outcome routing and the unified success continuation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tandem.kernel.command import Command, Deliver
from tandem.kernel.result import Failure, Success, TerminalOutcome

if TYPE_CHECKING:
    from tandem.combinators.handle import Join

logger = logging.getLogger(__name__)

# What a continuation hands back: the next stage to store in place of the
# finished join (None when nothing follows) and the command to forward.
Step = tuple["Join | None", Command]

Continuation = Callable[..., Step]


def deliver(on_success: Callable[..., Any]) -> Continuation:
    """Adapt a plain success handler into a continuation.

    The handler's return value becomes a zero-delay Deliver command and
    no further stage is started.
    """
    def continuation(*values: Any) -> Step:
        return None, Deliver(on_success(*values))

    return continuation


@dataclass(frozen=True)
class Router:
    """Turns a join's terminal outcome into exactly one host step.

    Attributes:
        on_complete: Continuation receiving the values on success.
        on_failure: Host message constructor for the first error.
        spread: Pass values as positional arguments (fixed arity) rather
            than as a single list (list joins).
    """

    on_complete: Continuation
    on_failure: Callable[[Any], Any]
    spread: bool = True

    def route(self, outcome: TerminalOutcome) -> Step:
        if isinstance(outcome, Failure):
            logger.debug("join failed: %r", outcome.error)
            return None, Deliver(self.on_failure(outcome.error))
        if isinstance(outcome, Success):
            logger.debug("join succeeded with %d value(s)", len(outcome.values))
            if self.spread:
                return self.on_complete(*outcome.values)
            return self.on_complete(list(outcome.values))
        raise TypeError(f"Unknown terminal outcome: {outcome!r}")
