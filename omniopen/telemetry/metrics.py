# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for argument validation."""

from __future__ import annotations

import logging

from .runtime import meter, telemetry_enabled

logger = logging.getLogger(__name__)

validation_failure_total = meter.create_counter(
    name="omniopen.validation.failure.total",
    description="Counts validation checks that raised an argument error.",
    unit="1",
)

validation_skipped_total = meter.create_counter(
    name="omniopen.validation.skipped.total",
    description="Counts validation calls that were skipped because no target or no predicate was supplied.",
    unit="1",
)


# ==============================================================================
# Recording helpers
# ==============================================================================


def record_validation_failure(validator: str, kind: str) -> None:
    """Count one failed validation; *kind* is ``"invalid"`` or ``"missing"``."""

    if not telemetry_enabled():
        return
    try:
        validation_failure_total.add(1, {"validator": validator, "kind": kind})
    except Exception:
        # Metrics must never change the outcome of a validation.
        logger.debug("Failed to record validation failure for %s", validator, exc_info=True)


def record_validation_skipped(validator: str, reason: str) -> None:
    """Count one soft no-op; *reason* is ``"no_target"`` or ``"no_predicate"``."""

    if not telemetry_enabled():
        return
    try:
        validation_skipped_total.add(1, {"validator": validator, "reason": reason})
    except Exception:
        logger.debug("Failed to record skipped validation for %s", validator, exc_info=True)


__all__ = [
    "validation_failure_total",
    "validation_skipped_total",
    "record_validation_failure",
    "record_validation_skipped",
]
