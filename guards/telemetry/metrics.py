# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for the guards library."""

from __future__ import annotations

import logging

from ..config import get_settings
from .runtime import meter

logger = logging.getLogger(__name__)

guard_violation_total = meter.create_counter(
    name="guards.violation.total",
    description="Counts failed precondition checks partitioned by check and failure kind.",
    unit="1",
)


def record_violation(check: str, kind: str) -> None:
    """Count one failed check.

    Args:
        check: Name of the guard function that failed (``"is_not_null"``)
        kind: Exception class raised for the failure (``"NullViolation"``)
    """
    if not get_settings().record_metrics:
        return

    try:
        guard_violation_total.add(1, {"check": check, "kind": kind})
    except Exception:
        # Telemetry must never interfere with the caller's failure
        logger.debug("Failed to record violation metric for '%s'", check, exc_info=True)


__all__ = [
    "guard_violation_total",
    "record_violation",
]
