"""Sinks for listener side effects."""

from .base import LogSink, MailRecord, Mailer
from .file import FileLogSink, LoggingMailer
from .memory import InMemoryLogSink, InMemoryMailer

__all__ = [
    "LogSink",
    "MailRecord",
    "Mailer",
    "FileLogSink",
    "LoggingMailer",
    "InMemoryLogSink",
    "InMemoryMailer",
]
