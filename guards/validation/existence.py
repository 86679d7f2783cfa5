# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Existence and shape checks: null, empty, blank and default values."""

from __future__ import annotations

import itertools
from collections.abc import Sized
from enum import Enum
from typing import Iterable, Optional

from ..exceptions import (
    BlankViolation,
    DefaultValueViolation,
    EmptinessViolation,
    NullViolation,
)
from .base import T, report, safe_argument_name
from .defaults import is_default

_MISSING = object()


class BlankReason(Enum):
    """Why a text argument was rejected by :func:`is_not_null_or_whitespace`."""

    NULL = "[NULL]"
    EMPTY = "[EMPTY]"
    WHITESPACE_ONLY = "[WHITESPACE-ONLY]"

    @property
    def tag(self) -> str:
        return self.value


def is_not_null(value: Optional[T], argument_name: Optional[str] = None) -> T:
    """Return *value* unless it is ``None``.

    Raises:
        NullViolation: If *value* is ``None``
    """
    if value is None:
        name = safe_argument_name(argument_name)
        raise report(
            NullViolation(
                f"Value cannot be null. (Parameter '{name}')",
                argument_name=name,
                check="is_not_null",
            )
        )
    return value


def is_not_empty(sequence: Iterable[T], argument_name: Optional[str] = None) -> Iterable[T]:
    """Return *sequence* unless it has no elements.

    Sized inputs are checked with ``len()``. Other iterables are probed for a
    first element only, so unbounded generators are safe to pass. A one-shot
    iterator loses its first element to the probe; it is returned as an
    iterator that yields that element again followed by the remainder.

    Raises:
        EmptinessViolation: If *sequence* has no elements
    """
    if isinstance(sequence, Sized):
        if len(sequence) > 0:
            return sequence
    else:
        iterator = iter(sequence)
        first = next(iterator, _MISSING)
        if first is not _MISSING:
            if iterator is sequence:
                return itertools.chain((first,), iterator)
            return sequence

    name = safe_argument_name(argument_name)
    raise report(
        EmptinessViolation(
            f"Parameter '{name}' cannot be empty.",
            argument_name=name,
            check="is_not_empty",
        )
    )


def is_not_null_or_empty(
    sequence: Optional[Iterable[T]], argument_name: Optional[str] = None
) -> Iterable[T]:
    """Return *sequence* unless it is ``None`` or empty (``None`` is reported first)."""

    is_not_null(sequence, argument_name)
    return is_not_empty(sequence, argument_name)


def _blank_reason(text: Optional[str]) -> Optional[BlankReason]:
    if text is None:
        return BlankReason.NULL
    if len(text) == 0:
        return BlankReason.EMPTY
    if text.isspace():
        return BlankReason.WHITESPACE_ONLY
    return None


def is_not_null_or_whitespace(text: Optional[str], argument_name: Optional[str] = None) -> str:
    """Return *text* unless it is ``None``, empty or made only of whitespace.

    Raises:
        BlankViolation: With ``reason`` set to the matching :class:`BlankReason`
    """
    reason = _blank_reason(text)
    if reason is None:
        return text

    name = safe_argument_name(argument_name)
    raise report(
        BlankViolation(
            f"Parameter '{name}' cannot be empty or whitespace only, but was '{reason.tag}'.",
            reason=reason,
            argument_name=name,
            check="is_not_null_or_whitespace",
        )
    )


def is_not_default(value: T, argument_name: Optional[str] = None) -> T:
    """Return *value* unless it equals the default value of its type.

    See :mod:`guards.validation.defaults` for how defaults are resolved.

    Raises:
        DefaultValueViolation: If *value* is ``None`` or its type's default
    """
    if is_default(value):
        name = safe_argument_name(argument_name)
        raise report(
            DefaultValueViolation(
                f"Specified argument was out of the range of valid values. (Parameter '{name}')",
                argument_name=name,
                check="is_not_default",
            )
        )
    return value


__all__ = [
    "BlankReason",
    "is_not_default",
    "is_not_empty",
    "is_not_null",
    "is_not_null_or_empty",
    "is_not_null_or_whitespace",
]
