"""Sinks that leave the process: a log file and a logging-backed mailer."""

from __future__ import annotations

import logging
from pathlib import Path

from .base import LogSink, Mailer

logger = logging.getLogger(__name__)


class FileLogSink(LogSink):
    """Append one line per message to ``path``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def write(self, message: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(message.rstrip("\n") + "\n")

    def dump(self) -> list[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()


class LoggingMailer(Mailer):
    """Report mail through ``logging`` instead of delivering it."""

    def __init__(self, sender: str = "switchyard@localhost") -> None:
        self.sender = sender

    def email(self, address: str, message: str) -> None:
        logger.info("Mail from %s to %s: %s", self.sender, address, message)
