"""Runtime trace infrastructure - separate from join state.

The trace records what a runtime did (launches, deliveries, updates) for
profiling and debugging. It never participates in join state transitions,
so accumulation stays pure whether tracing is on or off.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """One recorded runtime event.

    Tree relationships are reconstructed only during visualization via
    Trace.as_tree().
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Runtime trace context for capturing execution events.

    Uses stack-based nesting via push/pop for parent-child relationships.
    Safe for single-threaded (asyncio) use only.

    - Trace disabled: single flag check per record
    - Evidence append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._stack: list[int] = []

    def push(self, event_id: int) -> None:
        """Make event_id the implicit parent of subsequent records."""
        self._stack.append(event_id)

    def pop(self) -> int | None:
        """Pop the current parent, or return None if the stack is empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "launch", "deliver", "update")
            info: Additional context
            parent_id: Explicit parent event ID; defaults to the stack top
            duration_ms: Execution duration

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        if parent_id is not None:
            effective_parent = parent_id
        elif self._stack:
            effective_parent = self._stack[-1]
        else:
            effective_parent = None

        event_id = self._next_id
        self._next_id += 1

        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=effective_parent,
                timestamp=datetime.now(UTC),
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events (for visualization)."""
        return list(self._events)

    def find(self, action: str) -> list[Evidence]:
        """Get all recorded events with the given action, in record order."""
        return [ev for ev in self._events if ev.action == action]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships.

        Returns:
            Dict mapping parent_id to list of child ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
        self._stack.clear()
