# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""``Guard`` namespace grouping every check as a static method.

.. code-block:: python

    from guards import Guard

    def transfer(amount, account):
        Guard.is_greater_than(amount, 0, "amount")
        Guard.is_not_null_or_whitespace(account, "account")
        ...
"""

from __future__ import annotations

from . import validation as _v


class Guard:
    """Stateless collection of precondition checks; never instantiated."""

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        raise TypeError("Guard is a namespace of static checks and cannot be instantiated")

    is_not_null = staticmethod(_v.is_not_null)
    is_not_empty = staticmethod(_v.is_not_empty)
    is_not_null_or_empty = staticmethod(_v.is_not_null_or_empty)
    is_not_null_or_whitespace = staticmethod(_v.is_not_null_or_whitespace)
    is_not_default = staticmethod(_v.is_not_default)

    is_required_that = staticmethod(_v.is_required_that)
    is_true = staticmethod(_v.is_true)
    is_false = staticmethod(_v.is_false)

    is_greater_than = staticmethod(_v.is_greater_than)
    is_greater_than_or_equal_to = staticmethod(_v.is_greater_than_or_equal_to)
    is_less_than = staticmethod(_v.is_less_than)
    is_less_than_or_equal_to = staticmethod(_v.is_less_than_or_equal_to)
    is_equal_to = staticmethod(_v.is_equal_to)
    is_not_equal_to = staticmethod(_v.is_not_equal_to)
    is_in_range = staticmethod(_v.is_in_range)
    is_in_range_exclusive = staticmethod(_v.is_in_range_exclusive)
    is_not_in_range = staticmethod(_v.is_not_in_range)
    is_not_in_range_exclusive = staticmethod(_v.is_not_in_range_exclusive)


__all__ = ["Guard"]
