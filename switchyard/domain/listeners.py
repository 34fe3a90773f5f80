"""Concrete listeners reacting to editor events."""

from __future__ import annotations

from typing import Any

from ..sinks.base import LogSink, Mailer

OPEN_MESSAGE = "Someone has opened the file: %s"
CHANGE_MESSAGE = "Someone has changed the file: %s"


def _render(message: str, payload: Any) -> str:
    # Only the %s placeholder is substituted; any other % is literal text.
    return message.replace("%s", str(payload))


class LoggingListener:
    """Write a line to a log sink for each event."""

    def __init__(self, sink: LogSink, message: str = OPEN_MESSAGE) -> None:
        self.sink = sink
        self.message = message

    def update(self, payload: Any) -> None:
        self.sink.write(_render(self.message, payload))

    def __repr__(self) -> str:
        return f"LoggingListener(message={self.message!r})"


class EmailAlertsListener:
    """Mail an alert to a fixed address for each event."""

    def __init__(self, email_address: str, mailer: Mailer, message: str = CHANGE_MESSAGE) -> None:
        self.email_address = email_address
        self.mailer = mailer
        self.message = message

    def update(self, payload: Any) -> None:
        self.mailer.email(self.email_address, _render(self.message, payload))

    def __repr__(self) -> str:
        return f"EmailAlertsListener(email_address={self.email_address!r})"
