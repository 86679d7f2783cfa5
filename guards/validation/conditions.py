# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Boolean condition checks."""

from __future__ import annotations

from typing import Any, Optional

from ..config import get_settings
from ..exceptions import ConditionViolation
from .base import report

DEFAULT_REQUIRED_MESSAGE = "The required argument expectation was not met."
DEFAULT_TRUE_MESSAGE = "Condition must be true."
DEFAULT_FALSE_MESSAGE = "Condition must be false."


def _require(condition: Any, message: str, check: str) -> None:
    if not condition:
        raise report(ConditionViolation(message, check=check))


def is_required_that(condition: Any, message: Optional[str] = None) -> None:
    """Raise :class:`ConditionViolation` when *condition* is falsy."""

    _require(condition, message or DEFAULT_REQUIRED_MESSAGE, "is_required_that")


def is_true(condition: Any, message: Optional[str] = None) -> None:
    """Raise :class:`ConditionViolation` when *condition* is falsy."""

    _require(condition, message or DEFAULT_TRUE_MESSAGE, "is_true")


def is_false(condition: Any, message: Optional[str] = None) -> None:
    """Raise :class:`ConditionViolation` when *condition* is truthy.

    The default message is "Condition must be false." unless the
    ``legacy_messages`` setting is on, which restores "Condition must be true.".
    """
    if not message:
        message = DEFAULT_TRUE_MESSAGE if get_settings().legacy_messages else DEFAULT_FALSE_MESSAGE
    _require(not condition, message, "is_false")


__all__ = [
    "DEFAULT_FALSE_MESSAGE",
    "DEFAULT_REQUIRED_MESSAGE",
    "DEFAULT_TRUE_MESSAGE",
    "is_false",
    "is_required_that",
    "is_true",
]
