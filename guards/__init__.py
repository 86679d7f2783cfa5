# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""guards - fail-fast precondition checks for function arguments.

.. code-block:: python

    import guards

    def resize(image, width, height):
        guards.is_not_null(image, "image")
        guards.is_in_range(width, 1, 8192, "width")
        guards.is_in_range(height, 1, 8192, "height")
        ...

Every check returns its input unchanged on success and raises a
:class:`~guards.exceptions.GuardViolation` subclass on failure.
"""

from .config import GuardSettings, configure, get_settings, reset_settings
from .exceptions import (
    BlankViolation,
    ConditionViolation,
    ConfigurationError,
    DefaultValueViolation,
    EmptinessViolation,
    GuardError,
    GuardViolation,
    NullViolation,
    RangeViolation,
)
from .guard import Guard
from .validation import (
    UNKNOWN_ARGUMENT_NAME,
    BlankReason,
    Comparable,
    is_equal_to,
    is_false,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range,
    is_in_range_exclusive,
    is_less_than,
    is_less_than_or_equal_to,
    is_not_default,
    is_not_empty,
    is_not_equal_to,
    is_not_in_range,
    is_not_in_range_exclusive,
    is_not_null,
    is_not_null_or_empty,
    is_not_null_or_whitespace,
    is_required_that,
    is_true,
    register_default,
)

__version__ = "1.0.0"

__all__ = [
    "Guard",
    "UNKNOWN_ARGUMENT_NAME",
    "BlankReason",
    "Comparable",
    "register_default",
    # Checks
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
    # Errors
    "GuardError",
    "GuardViolation",
    "ConfigurationError",
    "NullViolation",
    "EmptinessViolation",
    "BlankViolation",
    "DefaultValueViolation",
    "ConditionViolation",
    "RangeViolation",
    # Settings
    "GuardSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
