"""Units, the selection that resolves them, and the actor commands drive."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class Unit:
    """Mutable target holding a single integer value."""

    def __init__(self, value: int = 0, *, name: str = "unit") -> None:
        self.name = name
        self._value = value
        self.lock = threading.RLock()

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        with self.lock:
            self._value = value

    def move_to(self, value: int) -> None:
        """Move the unit by ``value``; the amount is added to the current value."""
        with self.lock:
            self._value += value

    def __repr__(self) -> str:
        return f"Unit(name={self.name!r}, value={self._value})"


class UnitSelection:
    """Keeps track of the currently selected unit.

    Instances are callable so they can be passed wherever a target resolver is
    expected.
    """

    def __init__(self, unit: Unit | None = None, *, initial_value: int = 0) -> None:
        self._selected = unit or Unit(initial_value)

    def select(self, unit: Unit) -> None:
        self._selected = unit

    @property
    def selected(self) -> Unit:
        return self._selected

    def __call__(self) -> Unit:
        return self._selected


@dataclass(slots=True)
class Actor:
    """Performs trades on behalf of stateless commands."""

    name: str = "actor"
    bought: int = 0
    sold: int = 0
    journal: list[str] = field(default_factory=list)

    def buy(self) -> None:
        self.bought += 1
        self.journal.append("buy")
        logger.info("%s: buy", self.name)

    def sell(self) -> None:
        self.sold += 1
        self.journal.append("sell")
        logger.info("%s: sell", self.name)
