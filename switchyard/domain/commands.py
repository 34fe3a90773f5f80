"""Commands: deferred units of work over an actor or a unit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .exceptions import InvalidCommandState
from .units import Unit

logger = logging.getLogger(__name__)


class Trader(Protocol):
    def buy(self) -> None: ...
    def sell(self) -> None: ...


@runtime_checkable
class SimpleCommand(Protocol):
    """Fire-and-forget command parameterised by the actor at call time."""

    def execute(self, actor: Trader) -> None: ...


@runtime_checkable
class UndoableCommand(Protocol):
    """Command bound to its target that can reverse its last execution."""

    def execute(self) -> None: ...
    def undo(self) -> None: ...


@dataclass(frozen=True, slots=True)
class BuyCommand:
    def execute(self, actor: Trader) -> None:
        actor.buy()


@dataclass(frozen=True, slots=True)
class SellCommand:
    def execute(self, actor: Trader) -> None:
        actor.sell()


@dataclass(slots=True)
class ModifyUnitCommand:
    """Move a unit by ``value`` and remember where it was.

    ``previous_value`` is captured by :meth:`execute` only. :meth:`undo` moves
    the unit back by the difference, so the restored value is exact even though
    ``Unit.move_to`` is additive.
    """

    unit: Unit
    value: int
    previous_value: int | None = field(default=None, init=False)

    @property
    def executed(self) -> bool:
        return self.previous_value is not None

    def execute(self) -> None:
        with self.unit.lock:
            self.previous_value = self.unit.value
            self.unit.move_to(self.value)
            logger.debug(
                "Moved %s by %d (%d -> %d)",
                self.unit.name,
                self.value,
                self.previous_value,
                self.unit.value,
            )

    def undo(self) -> None:
        with self.unit.lock:
            if self.previous_value is None:
                raise InvalidCommandState("undo() called before execute()")
            self.unit.move_to(self.previous_value - self.unit.value)
            logger.debug("Restored %s to %d", self.unit.name, self.unit.value)
