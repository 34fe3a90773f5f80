"""Translate trigger signals into commands."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Protocol, Sequence

from .commands import BuyCommand, ModifyUnitCommand, SellCommand, SimpleCommand
from .units import Unit


class Action(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


DEFAULT_PRIORITY: tuple[Action, ...] = (Action.BUY, Action.SELL)


class TriggerSource(Protocol):
    def is_triggered(self, action: Action) -> bool: ...


TargetResolver = Callable[[], Unit]


class StaticTriggers:
    """Trigger source reporting a fixed set of actions as active."""

    def __init__(self, active: Iterable[Action | str] = ()) -> None:
        self._active = {Action(action) for action in active}

    def press(self, action: Action | str) -> None:
        self._active.add(Action(action))

    def release(self, action: Action | str) -> None:
        self._active.discard(Action(action))

    def is_triggered(self, action: Action) -> bool:
        return action in self._active


class ActorCommandSource:
    """Return the shared stateless command for the first triggered action."""

    def __init__(
        self,
        triggers: TriggerSource,
        *,
        priority: Sequence[Action] = DEFAULT_PRIORITY,
    ) -> None:
        self._triggers = triggers
        self._priority = tuple(priority)
        self._commands: dict[Action, SimpleCommand] = {
            Action.BUY: BuyCommand(),
            Action.SELL: SellCommand(),
        }

    def poll(self) -> SimpleCommand | None:
        for action in self._priority:
            if self._triggers.is_triggered(action):
                return self._commands[action]
        return None


class UnitCommandSource:
    """Build a ModifyUnitCommand against the currently selected unit."""

    def __init__(
        self,
        triggers: TriggerSource,
        resolver: TargetResolver,
        *,
        step: int = 1,
        priority: Sequence[Action] = DEFAULT_PRIORITY,
    ) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        self._triggers = triggers
        self._resolver = resolver
        self._step = step
        self._priority = tuple(priority)

    def poll(self) -> ModifyUnitCommand | None:
        # Resolve once so every trigger checked below sees the same unit.
        unit = self._resolver()
        for action in self._priority:
            if not self._triggers.is_triggered(action):
                continue
            delta = self._step if action is Action.BUY else -self._step
            return ModifyUnitCommand(unit, delta)
        return None
