"""List joins."""

import random

import pytest

from tandem import Join, ListJoin, Outcome, join, join_list, join_list_then, update_join_list

from fakes import Done, Failed, ManualHost, Progress, done, done_list, never_called


def start(n: int) -> ManualHost:
    return ManualHost.start(
        join_list(
            [never_called] * n,
            on_progress=Progress,
            on_success=done_list,
            on_failure=Failed,
        )
    )


def test_list_keeps_original_order() -> None:
    """Completions arrive C, A, B; values are reported A, B, C."""
    host = start(3)
    host.resolve(2, Outcome.Ok("c"))
    host.resolve(0, Outcome.Ok("a"))
    assert host.delivered == []
    host.resolve(1, Outcome.Ok("b"))

    assert host.delivered == [Done(["a", "b", "c"])]
    assert isinstance(host.handle, ListJoin)


@pytest.mark.parametrize("length", [1, 2, 7, 50])
def test_success_iff_all_slots_filled(length: int) -> None:
    host = start(length)
    order = list(range(length))
    random.Random(length).shuffle(order)

    for step, index in enumerate(order):
        host.resolve(index, Outcome.Ok(index * index))
        if step < length - 1:
            assert host.delivered == []

    assert host.delivered == [Done([i * i for i in range(length)])]
    assert len(host.delivered[0].values) == length


def test_empty_list_succeeds_immediately() -> None:
    host = start(0)
    assert host.delivered == [Done([])]
    assert host.handle.is_succeeded


def test_list_failure_short_circuits() -> None:
    host = start(4)
    host.resolve(3, Outcome.Ok(3))
    host.resolve(1, Outcome.Err("bad"))
    host.resolve(0, Outcome.Ok(0))
    host.resolve(2, Outcome.Ok(2))

    assert host.delivered == [Failed("bad")]


def test_update_join_list_alias() -> None:
    host = start(1)
    notification = host.launches[0].resolve(Outcome.Ok(9)).notification
    handle, command = update_join_list(host.handle, notification)
    assert handle.is_succeeded
    assert command.messages() == [Done([9])]


def test_accepts_any_sequence() -> None:
    handle, command = join_list(
        (never_called, never_called),
        on_progress=Progress,
        on_success=done_list,
        on_failure=Failed,
    )
    assert handle.size == 2
    assert len(command.launches()) == 2


@pytest.mark.parametrize("length", [0, 2])
def test_join_list_returns_list_handle(length: int) -> None:
    handle, _ = join_list(
        [never_called] * length,
        on_progress=Progress,
        on_success=done_list,
        on_failure=Failed,
    )
    assert isinstance(handle, ListJoin)


def test_join_list_then_handle_types() -> None:
    def then(values):
        return join(never_called, never_called, on_progress=Progress, on_success=done, on_failure=Failed)

    started, _ = join_list_then([never_called], on_progress=Progress, then=then, on_failure=Failed)
    assert isinstance(started, ListJoin)

    chained, _ = join_list_then([], on_progress=Progress, then=then, on_failure=Failed)
    assert type(chained) is Join
    assert chained.stage == 2
