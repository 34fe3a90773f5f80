"""Side-effect sinks used by the concrete listeners."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(slots=True)
class MailRecord:
    address: str
    message: str
    sent_at: datetime


class LogSink(Protocol):
    def write(self, message: str) -> None:
        ...


class Mailer(Protocol):
    def email(self, address: str, message: str) -> None:
        ...
