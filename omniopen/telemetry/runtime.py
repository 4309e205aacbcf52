# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared OpenTelemetry handles and the telemetry on/off switch."""

from __future__ import annotations

import os

from opentelemetry import metrics

METER_NAME = "omniopen.foundation"

# Resolves to a no-op meter until the host application installs a MeterProvider.
meter = metrics.get_meter(METER_NAME)


def telemetry_enabled() -> bool:
    """Return ``False`` when ``OMNIOPEN_TELEMETRY`` is set to a false-y value."""

    return os.getenv("OMNIOPEN_TELEMETRY", "1") not in ("", "0", "false", "no")


__all__ = [
    "METER_NAME",
    "meter",
    "telemetry_enabled",
]
