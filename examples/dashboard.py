"""
Loading a dashboard from three independent sources.

This example shows:
1. A host model and update function in message-passing style
2. A fixed-arity join over heterogeneous results
3. Progress messages routed back into the join handle
4. Trace enabled on the runtime
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any

from tandem import Command, Join, Runtime, RuntimeConfig, SlotNotification, join

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# =============================================================================
# Fake sources (simulate network latency)
# =============================================================================
async def fetch_user() -> dict[str, str]:
    await asyncio.sleep(0.03)
    return {"name": "ada"}


async def fetch_unread() -> int:
    await asyncio.sleep(0.01)
    return 7


async def fetch_theme() -> str:
    await asyncio.sleep(0.02)
    return "dark"


# =============================================================================
# Host messages and model
# =============================================================================
@dataclass(frozen=True)
class Loading:
    notification: SlotNotification


@dataclass(frozen=True)
class Loaded:
    user: dict[str, str]
    unread: int
    theme: str


@dataclass(frozen=True)
class LoadFailed:
    error: Any


@dataclass(frozen=True)
class Page:
    loader: Join
    content: Loaded | LoadFailed | None = None


def update(page: Page, msg: Any) -> tuple[Page, Command]:
    if isinstance(msg, Loading):
        loader, command = page.loader.update(msg.notification)
        return replace(page, loader=loader), command
    return replace(page, content=msg), Command.none()


async def main() -> None:
    loader, command = join(
        fetch_user,
        fetch_unread,
        fetch_theme,
        on_progress=Loading,
        on_success=Loaded,
        on_failure=LoadFailed,
    )
    runtime = Runtime(update, RuntimeConfig(trace=True))
    report = await runtime.run(Page(loader=loader), command)

    print(f"  Content: {report.model.content}")
    print(f"  Messages: {report.messages}")
    assert report.trace is not None
    for event in report.trace.get_events():
        print(f"    - {event.action}: {event.info}")


if __name__ == "__main__":
    asyncio.run(main())
