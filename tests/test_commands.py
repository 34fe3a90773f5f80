import threading

import pytest

from switchyard.domain.commands import (
    BuyCommand,
    ModifyUnitCommand,
    SellCommand,
    SimpleCommand,
    UndoableCommand,
)
from switchyard.domain.exceptions import InvalidCommandState, SwitchyardError
from switchyard.domain.units import Actor, Unit
from switchyard.testing import UnitFactory


def test_stateless_commands_act_every_time():
    actor = Actor()
    buy = BuyCommand()
    buy.execute(actor)
    buy.execute(actor)
    SellCommand().execute(actor)

    assert actor.bought == 2
    assert actor.sold == 1
    assert actor.journal == ["buy", "buy", "sell"]


def test_command_types_satisfy_their_protocols():
    assert isinstance(BuyCommand(), SimpleCommand)
    command = ModifyUnitCommand(Unit(), 1)
    assert isinstance(command, UndoableCommand)


def test_execute_moves_additively_and_undo_restores():
    unit = Unit(5)
    command = ModifyUnitCommand(unit, 6)

    command.execute()
    assert unit.value == 11
    assert command.previous_value == 5

    command.undo()
    assert unit.value == 5


@pytest.mark.parametrize("delta", [-50, -1, 0, 3, 1000])
def test_undo_is_exact_regardless_of_value(delta):
    unit = UnitFactory().build()
    original = unit.value
    command = ModifyUnitCommand(unit, delta)

    command.execute()
    command.undo()

    assert unit.value == original


def test_repeated_undo_keeps_restored_value():
    unit = Unit(2)
    command = ModifyUnitCommand(unit, 4)
    command.execute()
    command.undo()
    command.undo()
    assert unit.value == 2


def test_previous_value_tracks_latest_execute():
    unit = Unit(1)
    command = ModifyUnitCommand(unit, 2)
    command.execute()
    command.execute()
    assert command.previous_value == 3
    assert unit.value == 5

    command.undo()
    assert unit.value == 3


def test_undo_before_execute_raises():
    command = ModifyUnitCommand(Unit(7), 1)
    assert not command.executed
    with pytest.raises(InvalidCommandState):
        command.undo()
    with pytest.raises(SwitchyardError):
        command.undo()


def test_undo_sees_changes_made_after_execute():
    unit = Unit(0)
    command = ModifyUnitCommand(unit, 10)
    command.execute()
    unit.value = 42
    command.undo()
    assert unit.value == 0


def test_concurrent_executes_do_not_lose_updates():
    unit = Unit(0)
    threads, rounds = 8, 500
    start = threading.Barrier(threads)

    def worker():
        start.wait()
        for _ in range(rounds):
            ModifyUnitCommand(unit, 1).execute()

    workers = [threading.Thread(target=worker) for _ in range(threads)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()

    assert unit.value == threads * rounds


def test_failed_undo_releases_unit_lock():
    unit = Unit(3)
    command = ModifyUnitCommand(unit, 1)
    with pytest.raises(InvalidCommandState):
        command.undo()

    acquired = []

    def try_lock():
        acquired.append(unit.lock.acquire(blocking=False))
        if acquired[-1]:
            unit.lock.release()

    thread = threading.Thread(target=try_lock)
    thread.start()
    thread.join()
    assert acquired == [True]
