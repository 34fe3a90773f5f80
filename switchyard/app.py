"""Top level application object wiring publishers, listeners and commands."""

from __future__ import annotations

from typing import Any

from .config import SwitchyardConfig
from .domain.editor import Editor, EditorEvent
from .domain.events import ListenerRegistry
from .domain.input import ActorCommandSource, StaticTriggers, TriggerSource, UnitCommandSource
from .domain.listeners import EmailAlertsListener, LoggingListener
from .domain.units import Actor, UnitSelection
from .sinks.base import LogSink, Mailer
from .sinks.file import FileLogSink, LoggingMailer
from .sinks.memory import InMemoryLogSink


class Application:
    """Central dependency container for the editor and trading demos."""

    def __init__(
        self,
        config: SwitchyardConfig,
        *,
        log_sink: LogSink | None = None,
        mailer: Mailer | None = None,
        triggers: TriggerSource | None = None,
        events: ListenerRegistry | None = None,
        actor: Actor | None = None,
    ) -> None:
        self.config = config
        self.log_sink = log_sink or self._default_log_sink()
        self.mailer = mailer or LoggingMailer()
        self.triggers = triggers or StaticTriggers()

        self.editor = Editor(events)
        self.logger = LoggingListener(self.log_sink, config.alerts.log_message)
        self.email_alerts = EmailAlertsListener(
            config.alerts.email_address,
            self.mailer,
            config.alerts.email_message,
        )

        self.actor = actor or Actor()
        self.selection = UnitSelection(initial_value=config.input.initial_unit_value)
        self.actor_commands = ActorCommandSource(self.triggers, priority=config.input.priority)
        self.unit_commands = UnitCommandSource(
            self.triggers,
            self.selection,
            step=config.input.unit_step,
            priority=config.input.priority,
        )
        self._configured = False

    def _default_log_sink(self) -> LogSink:
        if self.config.alerts.log_path:
            return FileLogSink(self.config.alerts.log_path)
        return InMemoryLogSink()

    def configure(self) -> "Application":
        """Subscribe the logger to opens and the email alerts to saves."""
        if not self._configured:
            self.editor.events.subscribe(EditorEvent.OPEN, self.logger)
            self.editor.events.subscribe(EditorEvent.SAVE, self.email_alerts)
            self._configured = True
        return self

    def shutdown(self) -> None:
        self.editor.events.unsubscribe(EditorEvent.SAVE, self.email_alerts)
        self.editor.events.unsubscribe(EditorEvent.OPEN, self.logger)
        self._configured = False

    def handle_input(self) -> bool:
        """Poll the actor command source once and run what it returns."""
        command = self.actor_commands.poll()
        if command is None:
            return False
        command.execute(self.actor)
        return True

    def snapshot(self) -> dict[str, Any]:
        """Export current wiring for debugging."""
        events = self.editor.events
        return {
            "subscriptions": {
                str(getattr(key, "value", key)): [repr(listener) for listener in events.listeners(key)]
                for key in events.keys()
            },
            "document": self.editor.document.name if self.editor.document else None,
            "unit": self.selection.selected.value,
            "priority": [action.value for action in self.config.input.priority],
        }
