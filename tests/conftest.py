"""Pytest fixtures for the guards test-suite."""
from __future__ import annotations

from typing import Any

import pytest

import guards.telemetry.metrics as _metrics
from guards.config import reset_settings


class RecordingCounter:
    """Counter stand-in that keeps every ``add`` call for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, dict[str, Any]]] = []

    def add(self, amount: int, attributes: dict[str, Any] | None = None) -> None:
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):  # noqa: D401
    """Every test starts from default settings and a clean environment."""
    monkeypatch.delenv("GUARDS_LEGACY_MESSAGES", raising=False)
    monkeypatch.delenv("GUARDS_METRICS", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def violation_counter(monkeypatch) -> RecordingCounter:
    """Swap the violation counter for a recorder."""
    counter = RecordingCounter()
    monkeypatch.setattr(_metrics, "guard_violation_total", counter)
    return counter
