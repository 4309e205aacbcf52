"""Telemetry package - OpenTelemetry metrics for argument validation."""

from .metrics import (
    record_validation_failure,
    record_validation_skipped,
    validation_failure_total,
    validation_skipped_total,
)
from .runtime import meter, telemetry_enabled

__all__ = [
    "meter",
    "telemetry_enabled",
    "record_validation_failure",
    "record_validation_skipped",
    "validation_failure_total",
    "validation_skipped_total",
]
