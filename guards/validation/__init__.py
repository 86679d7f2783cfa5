"""Validation package - the precondition checks.

Each check returns its input unchanged when the precondition holds and raises
a :class:`~guards.exceptions.GuardViolation` subclass when it does not.
"""

from .base import UNKNOWN_ARGUMENT_NAME, Comparable, safe_argument_name
from .comparisons import (
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range,
    is_in_range_exclusive,
    is_less_than,
    is_less_than_or_equal_to,
    is_not_equal_to,
    is_not_in_range,
    is_not_in_range_exclusive,
)
from .conditions import is_false, is_required_that, is_true
from .defaults import NO_DEFAULT, default_for, register_default
from .existence import (
    BlankReason,
    is_not_default,
    is_not_empty,
    is_not_null,
    is_not_null_or_empty,
    is_not_null_or_whitespace,
)

__all__ = [
    "UNKNOWN_ARGUMENT_NAME",
    "BlankReason",
    "Comparable",
    "NO_DEFAULT",
    "default_for",
    "register_default",
    "safe_argument_name",
    "is_not_null",
    "is_not_empty",
    "is_not_null_or_empty",
    "is_not_null_or_whitespace",
    "is_not_default",
    "is_required_that",
    "is_true",
    "is_false",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_equal_to",
    "is_not_equal_to",
    "is_in_range",
    "is_in_range_exclusive",
    "is_not_in_range",
    "is_not_in_range_exclusive",
]
