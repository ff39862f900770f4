"""Error types for tandem."""

from __future__ import annotations

from typing import Any


class JoinError(Exception):
    """Base class for tandem errors."""


class OperationFailed(JoinError):
    """The first failure reported by an operation of a join.

    This is the only domain error. The original error value is kept
    untouched so callers can inspect or re-raise it.
    """

    def __init__(self, error: Any, index: int | None = None) -> None:
        self.error = error
        self.index = index
        where = f" (slot {index})" if index is not None else ""
        super().__init__(f"operation failed{where}: {error!r}")

    def __repr__(self) -> str:
        return f"OperationFailed(error={self.error!r}, index={self.index!r})"


class SlotIndexError(JoinError, IndexError):
    """A notification addressed a slot outside the join."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"slot index {index} out of range for join of size {size}")


class RuntimeLimitError(JoinError):
    """A runtime processed more messages than its configured bound."""
