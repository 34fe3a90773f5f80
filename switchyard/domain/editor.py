"""Editor publisher and the documents it works on."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath

from .events import ListenerRegistry
from .exceptions import NoDocumentOpen

logger = logging.getLogger(__name__)


class EditorEvent(str, Enum):
    OPEN = "open"
    SAVE = "save"
    CLOSE = "close"


@dataclass(slots=True)
class Document:
    """In-memory stand-in for an opened file."""

    path: str
    lines: list[str] = field(default_factory=list)
    saves: int = 0

    @property
    def name(self) -> str:
        return self.path

    def write(self, message: str = "") -> None:
        self.lines.append(message)
        self.saves += 1


class Editor:
    """Publisher whose file operations are broadcast through ``events``."""

    def __init__(self, events: ListenerRegistry | None = None) -> None:
        self.events = events if events is not None else ListenerRegistry()
        self._document: Document | None = None

    @property
    def document(self) -> Document | None:
        return self._document

    def open_file(self, path: str | PurePath) -> Document:
        self._document = Document(path=str(path))
        logger.info("Opened %s", self._document.name)
        self.events.notify(EditorEvent.OPEN, self._document.name)
        return self._document

    def save_file(self, message: str = "") -> Document:
        if self._document is None:
            raise NoDocumentOpen("save")
        self._document.write(message)
        logger.info("Saved %s", self._document.name)
        self.events.notify(EditorEvent.SAVE, self._document.name)
        return self._document

    def close_file(self) -> Document:
        if self._document is None:
            raise NoDocumentOpen("close")
        document, self._document = self._document, None
        logger.info("Closed %s", document.name)
        self.events.notify(EditorEvent.CLOSE, document.name)
        return document
