"""Runtime configuration."""

from __future__ import annotations

import asyncio

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator


class RuntimeConfig(BaseModel):
    """Settings for executing join commands on asyncio.

    Attributes:
        max_concurrency: Upper bound on operations running at once. None
            launches every operation immediately.
        catch: Exception types an operation may raise that are reported to
            the join as failures. Anything else escapes Runtime.run().
        trace: Record Evidence for launches, deliveries and updates.
        max_messages: Upper bound on messages processed by one run.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    max_concurrency: PositiveInt | None = None
    catch: tuple[type[BaseException], ...] = (Exception,)
    trace: bool = False
    max_messages: PositiveInt | None = None

    @field_validator("catch")
    @classmethod
    def keep_cancellation(
        cls, value: tuple[type[BaseException], ...]
    ) -> tuple[type[BaseException], ...]:
        for exc_type in value:
            if issubclass(asyncio.CancelledError, exc_type):
                raise ValueError(
                    f"catch must not include {exc_type.__name__}: it would swallow task cancellation"
                )
        return value
