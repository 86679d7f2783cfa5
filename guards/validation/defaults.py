# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Default-value resolution used by :func:`guards.is_not_default`.

Python has no universal "default of a type", so the default is looked up in a
single-dispatch registry keyed on the value's type:

- numbers, strings, bytes and the builtin containers use their no-argument
  constructor (``0``, ``0.0``, ``False``, ``""``, ``()``, ``[]``, ``{}``)
- ``datetime``/``date`` use their ``min`` (aware datetimes keep their tzinfo)
- ``time`` is midnight, ``timedelta`` is zero, ``UUID`` is the nil UUID
- dataclasses are default when every init field has a default and holds it;
  they are never instantiated

Types without a known default return :data:`NO_DEFAULT`, so their values can
never be "the default".
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import numbers
import uuid
from datetime import date, datetime, time, timedelta
from typing import Any, Callable

logger = logging.getLogger(__name__)


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


def _construct(value: Any) -> Any:
    try:
        return type(value)()
    except TypeError:
        # e.g. namedtuples
        return NO_DEFAULT


@functools.singledispatch
def default_for(value: Any) -> Any:
    """Return the default value of ``type(value)`` or :data:`NO_DEFAULT`.

    Unregistered dataclasses also return :data:`NO_DEFAULT`; they are compared
    field by field in :func:`is_default` instead of being instantiated.
    """

    return NO_DEFAULT


def _fields_at_default(value: Any) -> bool:
    for field in dataclasses.fields(value):
        if not field.init:
            continue
        if field.default is not dataclasses.MISSING:
            default = field.default
        elif field.default_factory is not dataclasses.MISSING:
            default = field.default_factory()
        else:
            return False
        if not getattr(value, field.name) == default:
            return False
    return True


@default_for.register(numbers.Number)
@default_for.register(str)
@default_for.register(bytes)
@default_for.register(bytearray)
@default_for.register(tuple)
@default_for.register(list)
@default_for.register(dict)
@default_for.register(set)
@default_for.register(frozenset)
@default_for.register(timedelta)
def _(value: Any) -> Any:
    return _construct(value)


@default_for.register(date)
def _(value: date) -> date:
    return date.min


@default_for.register(datetime)
def _(value: datetime) -> datetime:
    return datetime.min.replace(tzinfo=value.tzinfo)


@default_for.register(time)
def _(value: time) -> time:
    return time(tzinfo=value.tzinfo)


@default_for.register(uuid.UUID)
def _(value: uuid.UUID) -> uuid.UUID:
    return uuid.UUID(int=0)


def is_default(value: Any) -> bool:
    """Return True when *value* is ``None`` or equals its type's default."""

    if value is None:
        return True
    default = default_for(value)
    if default is NO_DEFAULT:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return _fields_at_default(value)
        return False
    return bool(value == default)


def register_default(cls: type, factory: Callable[[], Any]) -> None:
    """Declare the default value of *cls* as the result of ``factory()``.

    Example:
        ```python
        register_default(Money, lambda: Money(0, "EUR"))
        is_not_default(Money(0, "EUR"), "price")  # raises DefaultValueViolation
        ```
    """
    if not callable(factory):
        raise TypeError("factory must be a zero-argument callable")

    default_for.register(cls)(lambda _value: factory())
    logger.debug("Registered default factory for %s", cls.__qualname__)


__all__ = [
    "NO_DEFAULT",
    "default_for",
    "is_default",
    "register_default",
]
