"""Telemetry package - OpenTelemetry instruments for failed checks."""

from .metrics import guard_violation_total, record_violation
from .runtime import METER_NAME, meter

__all__ = [
    "METER_NAME",
    "guard_violation_total",
    "meter",
    "record_violation",
]
