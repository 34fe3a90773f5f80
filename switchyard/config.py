"""Configuration models for switchyard."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Sequence

from rich.logging import RichHandler

from .domain.input import DEFAULT_PRIORITY, Action
from .domain.listeners import CHANGE_MESSAGE, OPEN_MESSAGE


@dataclass(slots=True)
class LoggingConfig:
    """How the command line entry points set up logging."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass(slots=True)
class AlertConfig:
    """Where the demo listeners send their output."""

    log_path: str | None = None
    log_message: str = OPEN_MESSAGE
    email_address: str = "admin@example.com"
    email_message: str = CHANGE_MESSAGE


@dataclass(slots=True)
class InputConfig:
    """Rules for turning triggers into commands."""

    priority: Sequence[Action] = DEFAULT_PRIORITY
    unit_step: int = 1
    initial_unit_value: int = 0


@dataclass(slots=True)
class SwitchyardConfig:
    """Top-level configuration container."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    alerts: AlertConfig = field(default_factory=AlertConfig)
    input: InputConfig = field(default_factory=InputConfig)

    @classmethod
    def from_env(cls) -> "SwitchyardConfig":
        """Create config from environment variables prefixed with SWITCHYARD_."""
        prefix = "SWITCHYARD_"

        logging_config = LoggingConfig(
            level=os.getenv(f"{prefix}LOG_LEVEL", "INFO").upper(),
            rich_tracebacks=os.getenv(f"{prefix}RICH_TRACEBACKS", "true").lower()
            in {"1", "true", "yes"},
        )

        alerts = AlertConfig(
            log_path=os.getenv(f"{prefix}LOG_PATH") or None,
            log_message=os.getenv(f"{prefix}LOG_MESSAGE") or OPEN_MESSAGE,
            email_address=os.getenv(f"{prefix}ALERT_EMAIL") or "admin@example.com",
            email_message=os.getenv(f"{prefix}EMAIL_MESSAGE") or CHANGE_MESSAGE,
        )

        input_config = InputConfig(
            priority=_parse_priority(os.getenv(f"{prefix}INPUT_PRIORITY")),
            unit_step=_parse_int(f"{prefix}UNIT_STEP", os.getenv(f"{prefix}UNIT_STEP"), 1),
            initial_unit_value=_parse_int(
                f"{prefix}UNIT_INITIAL_VALUE", os.getenv(f"{prefix}UNIT_INITIAL_VALUE"), 0
            ),
        )
        if input_config.unit_step <= 0:
            raise ValueError(f"{prefix}UNIT_STEP must be positive")

        return cls(logging=logging_config, alerts=alerts, input=input_config)


def configure_logging(config: LoggingConfig) -> None:
    """Route log records through rich; used by the command line entry points."""
    logging.basicConfig(
        level=config.level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=config.rich_tracebacks)],
        force=True,
    )


def _parse_priority(raw: str | None) -> tuple[Action, ...]:
    if not raw:
        return DEFAULT_PRIORITY
    try:
        return tuple(Action(item.strip().upper()) for item in raw.split(",") if item.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid action in SWITCHYARD_INPUT_PRIORITY: {raw!r}") from exc


def _parse_int(name: str, raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
