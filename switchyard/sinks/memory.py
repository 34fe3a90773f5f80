"""In-memory sinks."""

from __future__ import annotations

from collections import deque
from datetime import datetime, timezone
from typing import Deque

from .base import LogSink, MailRecord, Mailer


class InMemoryLogSink(LogSink):
    def __init__(self, *, maxlen: int = 1000) -> None:
        self._lines: Deque[str] = deque(maxlen=maxlen)

    def write(self, message: str) -> None:
        self._lines.append(message)

    def dump(self) -> list[str]:
        return list(self._lines)


class InMemoryMailer(Mailer):
    def __init__(self, *, maxlen: int = 1000) -> None:
        self._outbox: Deque[MailRecord] = deque(maxlen=maxlen)

    def email(self, address: str, message: str) -> None:
        self._outbox.append(MailRecord(address, message, datetime.now(timezone.utc)))

    def outbox(self, address: str | None = None) -> list[MailRecord]:
        if address is None:
            return list(self._outbox)
        return [record for record in self._outbox if record.address == address]
