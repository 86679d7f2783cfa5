# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared building blocks for the check modules."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, TypeVar

from ..exceptions import GuardViolation
from ..telemetry.metrics import record_violation

logger = logging.getLogger(__name__)

UNKNOWN_ARGUMENT_NAME = "[Unknown Argument Name]"


class Comparable(Protocol):
    """Values that support the rich comparison operators."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    def __ge__(self, other: Any) -> bool: ...


T = TypeVar("T")
C = TypeVar("C", bound=Comparable)
V = TypeVar("V", bound=GuardViolation)


def safe_argument_name(argument_name: Optional[str]) -> str:
    """Return *argument_name*, or the placeholder when it is missing or empty."""

    return argument_name or UNKNOWN_ARGUMENT_NAME


def report(violation: V) -> V:
    """Log and count *violation*, then hand it back for the caller to raise."""

    logger.debug(
        "Guard check '%s' failed for argument '%s': %s",
        violation.check,
        violation.argument_name,
        violation.message,
    )
    record_violation(violation.check or "unknown", type(violation).__name__)
    return violation


__all__ = [
    "C",
    "Comparable",
    "T",
    "UNKNOWN_ARGUMENT_NAME",
    "report",
    "safe_argument_name",
]
