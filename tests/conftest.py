"""Pytest fixtures shared by the OmniOpen foundation test-suite.

The production code records metrics through the OpenTelemetry API. Without a
configured MeterProvider those instruments are no-ops, so tests that care
about what gets recorded swap the module-level instruments for the in-memory
recorders below.
"""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from omniopen.telemetry import metrics


class RecordingCounter:  # pylint: disable=too-few-public-methods
    """Counter stand-in that remembers every ``add`` call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[int, Dict[str, Any]]] = []

    def add(self, amount: int, attributes: Dict[str, Any] | None = None) -> None:  # noqa: D401
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture
def recorded_metrics(monkeypatch):
    """Replace the validation counters with recorders and return them."""

    monkeypatch.setenv("OMNIOPEN_TELEMETRY", "1")
    failures = RecordingCounter()
    skipped = RecordingCounter()
    monkeypatch.setattr(metrics, "validation_failure_total", failures)
    monkeypatch.setattr(metrics, "validation_skipped_total", skipped)
    return {"failure": failures, "skipped": skipped}
