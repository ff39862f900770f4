"""Runtime layer - executes join commands on asyncio."""

from tandem.runtime.config import RuntimeConfig
from tandem.runtime.gather import attempt, attempt_list
from tandem.runtime.loop import RunReport, Runtime

__all__ = [
    "Runtime",
    "RuntimeConfig",
    "RunReport",
    "attempt",
    "attempt_list",
]
