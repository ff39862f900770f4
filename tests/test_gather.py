import asyncio
import time

import pytest

from tandem import Outcome, OperationFailed, RuntimeConfig, SlotNotification, attempt, attempt_list
from tandem.runtime import gather

from fakes import NetworkError, raising, returning


def test_attempt_returns_values_in_launch_order() -> None:
    async def run():
        return await attempt(
            returning("slow", delay=0.03),
            returning("fast", delay=0.0),
            returning(3, delay=0.01),
        )

    assert asyncio.run(run()) == ("slow", "fast", 3)


def test_attempt_raises_first_failure() -> None:
    error = NetworkError("down")

    async def run():
        await attempt(
            returning(1, delay=0.02),
            raising(error, delay=0.01),
            raising(NetworkError("later"), delay=0.03),
        )

    with pytest.raises(OperationFailed) as info:
        asyncio.run(run())

    assert info.value.error is error
    assert info.value.index == 1
    assert info.value.__cause__ is error


def test_attempt_list_keeps_order() -> None:
    async def run():
        ops = [returning(i, delay=(5 - i) * 0.005) for i in range(5)]
        return await attempt_list(ops)

    assert asyncio.run(run()) == [0, 1, 2, 3, 4]


def test_attempt_list_empty() -> None:
    assert asyncio.run(attempt_list([])) == []


def test_attempt_with_config() -> None:
    async def run():
        return await attempt_list(
            [returning(i, delay=0.001) for i in range(20)],
            config=RuntimeConfig(max_concurrency=2),
        )

    assert asyncio.run(run()) == list(range(20))


def test_operation_failed_repr() -> None:
    failure = OperationFailed("boom", index=2)
    assert failure.error == "boom"
    assert "slot 2" in str(failure)
    assert repr(failure) == "OperationFailed(error='boom', index=2)"


def test_attempt_raises_without_waiting_for_slow_operations() -> None:
    async def run():
        start = time.perf_counter()
        with pytest.raises(OperationFailed):
            await attempt(raising(NetworkError("fast")), returning(1, delay=1.0))
        return time.perf_counter() - start

    assert asyncio.run(run()) < 0.5


def test_attempt_list_raises_without_waiting_for_slow_operations() -> None:
    async def run():
        start = time.perf_counter()
        with pytest.raises(OperationFailed) as info:
            await attempt_list([returning(1, delay=1.0), raising(NetworkError("fast"), delay=0.01)])
        return time.perf_counter() - start, info.value.index

    elapsed, index = asyncio.run(run())
    assert elapsed < 0.5
    assert index == 1


def test_progress_before_start_is_rejected() -> None:
    notification = SlotNotification(join_id=1, index=0, outcome=Outcome.Ok(1))
    with pytest.raises(RuntimeError, match="before the join started"):
        gather._update(gather._Host(), gather._Progress(notification))
