"""switchyard public API."""

from .app import Application
from .config import SwitchyardConfig
from .domain.commands import BuyCommand, ModifyUnitCommand, SellCommand
from .domain.events import CallbackListener, ListenerRegistry

__all__ = [
    "Application",
    "SwitchyardConfig",
    "BuyCommand",
    "ModifyUnitCommand",
    "SellCommand",
    "CallbackListener",
    "ListenerRegistry",
]
