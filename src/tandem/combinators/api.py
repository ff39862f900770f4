"""Join entry points: fixed arity, list, and chained forms."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any, TypeVar, cast, overload

from tandem.combinators.dispatch import OnProgress, dispatch
from tandem.combinators.handle import Join, ListJoin
from tandem.combinators.router import Continuation, Router, Step, deliver
from tandem.kernel.command import Command
from tandem.kernel.notification import SlotNotification
from tandem.kernel.ports import Operation
from tandem.kernel.result import Success

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
M = TypeVar("M")

OnFailure = Callable[[Any], Any]

J = TypeVar("J", bound=Join)


def _start(
    kind: type[J],
    operations: Sequence[Operation[Any]],
    on_progress: OnProgress,
    on_complete: Continuation,
    on_failure: OnFailure,
) -> tuple[Join, Command]:
    router = Router(
        on_complete=on_complete,
        on_failure=on_failure,
        spread=kind is not ListJoin,
    )
    join_id, state, command = dispatch(operations, on_progress)
    handle = kind(_id=join_id, _state=state, _router=router)
    if state.size:
        return handle, command

    # Nothing to wait for: succeed at once with no values.
    following, done = router.route(Success(()))
    if following is not None:
        return following.chained_after(handle), done
    return replace(handle, _state=state.succeed()), done


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    op3: Operation[C],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B, C], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    op3: Operation[C],
    op4: Operation[D],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B, C, D], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    op3: Operation[C],
    op4: Operation[D],
    op5: Operation[E],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B, C, D, E], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    op3: Operation[C],
    op4: Operation[D],
    op5: Operation[E],
    op6: Operation[F],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B, C, D, E, F], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    op3: Operation[C],
    op4: Operation[D],
    op5: Operation[E],
    op6: Operation[F],
    op7: Operation[G],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B, C, D, E, F, G], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    op3: Operation[C],
    op4: Operation[D],
    op5: Operation[E],
    op6: Operation[F],
    op7: Operation[G],
    op8: Operation[H],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B, C, D, E, F, G, H], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    op1: Operation[A],
    op2: Operation[B],
    op3: Operation[C],
    op4: Operation[D],
    op5: Operation[E],
    op6: Operation[F],
    op7: Operation[G],
    op8: Operation[H],
    op9: Operation[I],
    /,
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[A, B, C, D, E, F, G, H, I], M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


@overload
def join(
    *operations: Operation[Any],
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[..., M],
    on_failure: Callable[[Any], M],
) -> tuple[Join, Command]: ...


def join(
    *operations: Operation[Any],
    on_progress: OnProgress,
    on_success: Callable[..., Any],
    on_failure: OnFailure,
) -> tuple[Join, Command]:
    """Start a join of heterogeneous operations.

    All operations are launched at once. When every one has succeeded,
    on_success is called with their values in launch order; as soon as one
    fails, on_failure is called with its error instead. Exactly one of the
    two fires per join.

    Args:
        *operations: Operations to run, in launch order.
        on_progress: Wraps each SlotNotification into a host message.
        on_success: Builds the host message for the aggregated values.
        on_failure: Builds the host message for the first error.

    Returns:
        The join handle to store and the launch command to forward.
    """
    return _start(Join, operations, on_progress, deliver(on_success), on_failure)


def join_list(
    operations: Sequence[Operation[A]],
    *,
    on_progress: Callable[[SlotNotification], M],
    on_success: Callable[[list[A]], M],
    on_failure: Callable[[Any], M],
) -> tuple[ListJoin, Command]:
    """Start a join over a list of same-typed operations.

    on_success receives one list of values in the original list order,
    regardless of completion order. An empty list succeeds immediately
    with an empty list.
    """
    handle, command = _start(ListJoin, list(operations), on_progress, deliver(on_success), on_failure)
    return cast(ListJoin, handle), command


def join_then(
    *operations: Operation[Any],
    on_progress: OnProgress,
    then: Callable[..., Step],
    on_failure: OnFailure,
) -> tuple[Join, Command]:
    """Start a join whose success launches a further stage.

    then receives the values in launch order and returns the next stage's
    (handle, command) pair, usually from another join call. The next stage
    replaces this join in the handle returned by update(); the first
    stage's success never reaches the host.
    """
    return _start(Join, operations, on_progress, then, on_failure)


def join_list_then(
    operations: Sequence[Operation[Any]],
    *,
    on_progress: OnProgress,
    then: Callable[[list[Any]], Step],
    on_failure: OnFailure,
) -> tuple[Join, Command]:
    """List form of join_then: then receives a single list of values.

    The handle is a ListJoin, except for an empty list, which succeeds at
    once and hands back the next stage directly.
    """
    return _start(ListJoin, list(operations), on_progress, then, on_failure)


def update(handle: Join, notification: SlotNotification) -> tuple[Join, Command]:
    """Apply a notification to a join handle; see Join.update."""
    return handle.update(notification)


update_join = update
update_join_list = update
