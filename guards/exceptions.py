# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for precondition failures.

Every failed check raises a subclass of :class:`GuardViolation`. The classes
carry the context of the failure as attributes so callers can inspect it
without parsing the message, while ``str(exc)`` is always the exact
human-readable message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple

if TYPE_CHECKING:
    from .validation.existence import BlankReason


class GuardError(Exception):
    """Base class for all errors raised by the guards library."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GuardError):
    """Raised when the library settings are malformed."""


class GuardViolation(GuardError, ValueError):
    """A precondition check failed."""

    def __init__(
        self,
        message: str,
        *,
        argument_name: Optional[str] = None,
        check: Optional[str] = None,
    ):
        super().__init__(message)
        self.argument_name = argument_name
        self.check = check


class NullViolation(GuardViolation, TypeError):
    """The value was ``None``."""


class EmptinessViolation(GuardViolation):
    """The sequence or string had no elements."""


class BlankViolation(GuardViolation):
    """The text was ``None``, empty or whitespace only."""

    def __init__(
        self,
        message: str,
        *,
        reason: "BlankReason",
        argument_name: Optional[str] = None,
        check: Optional[str] = None,
    ):
        super().__init__(message, argument_name=argument_name, check=check)
        self.reason: BlankReason = reason


class DefaultValueViolation(GuardViolation):
    """The value equals the default value of its type."""


class ConditionViolation(GuardViolation):
    """A boolean precondition did not hold."""


class RangeViolation(GuardViolation):
    """A comparison or range check failed.

    ``relation`` is the phrase used in the message (``"be greater than"``),
    ``bounds`` holds the reference value(s) and ``actual`` the rejected value.
    """

    def __init__(
        self,
        message: str,
        *,
        relation: str,
        bounds: Tuple[Any, ...],
        actual: Any,
        argument_name: Optional[str] = None,
        check: Optional[str] = None,
    ):
        super().__init__(message, argument_name=argument_name, check=check)
        self.relation = relation
        self.bounds = bounds
        self.actual = actual


__all__ = [
    "GuardError",
    "ConfigurationError",
    "GuardViolation",
    "NullViolation",
    "EmptinessViolation",
    "BlankViolation",
    "DefaultValueViolation",
    "ConditionViolation",
    "RangeViolation",
]
