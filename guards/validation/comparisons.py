# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Ordering, equality and range checks.

Every predicate is evaluated literally (``value > bound`` and so on), so a
value that is unordered against its bound, such as ``float("nan")``, fails
all ordering checks. Values of incomparable types raise Python's own
``TypeError``.

Failures raise :class:`~guards.exceptions.RangeViolation` with messages of the
form ``Argument '<name>' must <relation> '<bound>' but was '<value>'.``
"""

from __future__ import annotations

from typing import Any, Optional

from ..exceptions import RangeViolation
from .base import C, report, safe_argument_name

GREATER_THAN = "be greater than"
GREATER_THAN_OR_EQUAL_TO = "be greater than or equal to"
LESS_THAN = "be less than"
LESS_THAN_OR_EQUAL_TO = "be less than or equal to"
EQUAL_TO = "be equal to"
NOT_EQUAL_TO = "not be equal to"
NOT_IN_RANGE = "not be in the range"


def _compare_failed(value: Any, bound: Any, relation: str, argument_name: Optional[str], check: str) -> RangeViolation:
    name = safe_argument_name(argument_name)
    return report(
        RangeViolation(
            f"Argument '{name}' must {relation} '{bound}' but was '{value}'.",
            relation=relation,
            bounds=(bound,),
            actual=value,
            argument_name=name,
            check=check,
        )
    )


def _range_failed(
    value: Any, start: Any, end: Any, argument_name: Optional[str], check: str, *, exclusive: bool
) -> RangeViolation:
    name = safe_argument_name(argument_name)
    suffix = " (exclusive)" if exclusive else ""
    return report(
        RangeViolation(
            f"Argument '{name}' must {NOT_IN_RANGE} '{start}' - '{end}'{suffix} but was '{value}'.",
            relation=NOT_IN_RANGE,
            bounds=(start, end),
            actual=value,
            argument_name=name,
            check=check,
        )
    )


def is_greater_than(value: C, bound: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if ``value > bound``."""

    if not value > bound:
        raise _compare_failed(value, bound, GREATER_THAN, argument_name, "is_greater_than")
    return value


def is_greater_than_or_equal_to(value: C, bound: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if ``value >= bound``."""

    if not value >= bound:
        raise _compare_failed(value, bound, GREATER_THAN_OR_EQUAL_TO, argument_name, "is_greater_than_or_equal_to")
    return value


def is_less_than(value: C, bound: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if ``value < bound``."""

    if not value < bound:
        raise _compare_failed(value, bound, LESS_THAN, argument_name, "is_less_than")
    return value


def is_less_than_or_equal_to(value: C, bound: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if ``value <= bound``."""

    if not value <= bound:
        raise _compare_failed(value, bound, LESS_THAN_OR_EQUAL_TO, argument_name, "is_less_than_or_equal_to")
    return value


def is_equal_to(value: C, expected: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if ``value == expected``."""

    if not value == expected:
        raise _compare_failed(value, expected, EQUAL_TO, argument_name, "is_equal_to")
    return value


def is_not_equal_to(value: C, expected: C, argument_name: Optional[str] = None) -> C:
    """Return *value* unless ``value == expected``."""

    if value == expected:
        raise _compare_failed(value, expected, NOT_EQUAL_TO, argument_name, "is_not_equal_to")
    return value


def is_in_range(value: C, start: C, end: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if ``start <= value <= end``.

    The lower bound is checked first, so a value below *start* reports the
    "greater than or equal to" message and a value above *end* the
    "less than or equal to" one.
    """
    is_greater_than_or_equal_to(value, start, argument_name)
    return is_less_than_or_equal_to(value, end, argument_name)


def is_in_range_exclusive(value: C, start: C, end: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if ``start < value < end``."""

    is_greater_than(value, start, argument_name)
    return is_less_than(value, end, argument_name)


def is_not_in_range(value: C, start: C, end: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if it lies outside the inclusive range ``[start, end]``."""

    if value >= start and value <= end:
        raise _range_failed(value, start, end, argument_name, "is_not_in_range", exclusive=False)
    return value


def is_not_in_range_exclusive(value: C, start: C, end: C, argument_name: Optional[str] = None) -> C:
    """Return *value* if it lies outside the open range ``(start, end)``.

    The endpoints themselves pass.
    """
    if value > start and value < end:
        raise _range_failed(value, start, end, argument_name, "is_not_in_range_exclusive", exclusive=True)
    return value


__all__ = [
    "is_equal_to",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_in_range",
    "is_in_range_exclusive",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_not_equal_to",
    "is_not_in_range",
    "is_not_in_range_exclusive",
]
