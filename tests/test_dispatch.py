from tandem import Batch, Command, Deliver, Launch, Outcome
from tandem.combinators import dispatch

from fakes import Progress, never_called


def test_dispatch_launches_every_operation() -> None:
    ops = [never_called, never_called, never_called]
    join_id, state, command = dispatch(ops, Progress)

    assert isinstance(command, Batch)
    launches = command.launches()
    assert len(launches) == 3
    assert [launch.operation for launch in launches] == ops
    assert state.size == 3
    assert state.is_pending
    assert all(slot.kind == "pending" for slot in state.slots)


def test_launch_tags_notification_with_slot() -> None:
    join_id, _, command = dispatch([never_called, never_called], Progress)
    msg = command.launches()[1].resolve(Outcome.Ok("v"))

    assert isinstance(msg, Progress)
    assert msg.notification.join_id == join_id
    assert msg.notification.index == 1
    assert msg.notification.outcome == Outcome.Ok("v")


def test_failure_is_captured_as_outcome() -> None:
    _, _, command = dispatch([never_called], Progress)
    msg = command.launches()[0].resolve(Outcome.Err("down"))
    assert msg.notification.failed
    assert msg.notification.outcome.error == "down"


def test_join_ids_are_unique() -> None:
    first, _, _ = dispatch([never_called], Progress)
    second, _, _ = dispatch([never_called], Progress)
    assert first != second


def test_empty_dispatch() -> None:
    _, state, command = dispatch([], Progress)
    assert state.size == 0
    assert command.empty


def test_command_flattening() -> None:
    launch = Launch(operation=never_called, to_msg=lambda outcome: outcome)
    command = Command.batch([Deliver("a"), Batch((launch, Deliver("b"))), Command.none()])

    assert command.launches() == [launch]
    assert command.messages() == ["a", "b"]
    assert not command.empty
    assert Command.none().empty
