"""Domain models and services."""

from .events import CallbackListener, EventKey, Listener, ListenerRegistry
from .commands import BuyCommand, ModifyUnitCommand, SellCommand, SimpleCommand, UndoableCommand
from .editor import Document, Editor, EditorEvent
from .input import Action, ActorCommandSource, StaticTriggers, TriggerSource, UnitCommandSource
from .listeners import EmailAlertsListener, LoggingListener
from .units import Actor, Unit, UnitSelection
from .exceptions import InvalidCommandState, NoDocumentOpen, SwitchyardError

__all__ = [
    "CallbackListener",
    "EventKey",
    "Listener",
    "ListenerRegistry",
    "BuyCommand",
    "ModifyUnitCommand",
    "SellCommand",
    "SimpleCommand",
    "UndoableCommand",
    "Document",
    "Editor",
    "EditorEvent",
    "Action",
    "ActorCommandSource",
    "StaticTriggers",
    "TriggerSource",
    "UnitCommandSource",
    "EmailAlertsListener",
    "LoggingListener",
    "Actor",
    "Unit",
    "UnitSelection",
    "InvalidCommandState",
    "NoDocumentOpen",
    "SwitchyardError",
]
