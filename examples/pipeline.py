"""
Two-stage pipeline: look up ids, then fetch every record.

Stage one joins two lookups; its continuation starts a list join sized by
the lookup results. The host only ever sees the final outcome.
"""

import asyncio
from dataclasses import dataclass, replace
from typing import Any

from tandem import Command, Join, Runtime, SlotNotification, attempt_list, join_list, join_then


class NotFound(Exception):
    pass


async def lookup_team() -> list[int]:
    await asyncio.sleep(0.01)
    return [1, 2, 3]


async def lookup_guests() -> list[int]:
    await asyncio.sleep(0.02)
    return [40]


def fetch_record(record_id: int):
    async def op() -> dict[str, Any]:
        await asyncio.sleep(0.001 * (record_id % 5))
        if record_id < 0:
            raise NotFound(record_id)
        return {"id": record_id}

    return op


@dataclass(frozen=True)
class Step:
    notification: SlotNotification


@dataclass(frozen=True)
class Finished:
    result: Any


@dataclass(frozen=True)
class Host:
    pipeline: Join
    result: Finished | None = None


def update(host: Host, msg: Any) -> tuple[Host, Command]:
    if isinstance(msg, Step):
        pipeline, command = host.pipeline.update(msg.notification)
        return replace(host, pipeline=pipeline), command
    return replace(host, result=msg), Command.none()


def fetch_all(team: list[int], guests: list[int]):
    return join_list(
        [fetch_record(i) for i in team + guests],
        on_progress=Step,
        on_success=Finished,
        on_failure=lambda error: Finished(f"failed: {error!r}"),
    )


async def main() -> None:
    pipeline, command = join_then(
        lookup_team,
        lookup_guests,
        on_progress=Step,
        then=fetch_all,
        on_failure=lambda error: Finished(f"lookup failed: {error!r}"),
    )
    report = await Runtime(update).run(Host(pipeline=pipeline), command)
    print(f"  Stage reached: {report.model.pipeline.stage}")
    print(f"  Result: {report.model.result}")

    # The same fan-out without a host loop
    records = await attempt_list([fetch_record(i) for i in (5, 6)])
    print(f"  attempt_list: {records}")


if __name__ == "__main__":
    asyncio.run(main())
