"""Testing utilities for switchyard."""

from .factory import DocumentPathFactory, UnitFactory
from .fixtures import app_fixture, memory_app
from .recorders import RecordingListener, ScriptedTriggers

__all__ = [
    "DocumentPathFactory",
    "UnitFactory",
    "app_fixture",
    "memory_app",
    "RecordingListener",
    "ScriptedTriggers",
]
