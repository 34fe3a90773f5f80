"""Pytest fixtures for switchyard."""

from __future__ import annotations

import pytest

from ..app import Application
from ..config import SwitchyardConfig
from ..sinks.memory import InMemoryLogSink, InMemoryMailer


@pytest.fixture()
def memory_app() -> Application:
    return app_fixture()


def app_fixture(**kwargs) -> Application:
    """Helper for ad-hoc tests where pytest fixtures are not available."""
    config = SwitchyardConfig(**kwargs)
    return Application(config, log_sink=InMemoryLogSink(), mailer=InMemoryMailer())
