# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide settings, read from ``GUARDS_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ENV_PREFIX = "GUARDS_"
_FALSY = ("", "0", "false", "no")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(f"{_ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


@dataclass(frozen=True)
class GuardSettings:
    """Behaviour switches for the checks.

    ``legacy_messages`` restores the historical default message of
    :func:`guards.is_false` ("Condition must be true.").
    ``record_metrics`` controls the violation counter.
    """

    legacy_messages: bool = False
    record_metrics: bool = True

    @staticmethod
    def from_env() -> GuardSettings:
        return GuardSettings(
            legacy_messages=_env_flag("LEGACY_MESSAGES", False),
            record_metrics=_env_flag("METRICS", True),
        )


_SETTINGS: Optional[GuardSettings] = None


def get_settings() -> GuardSettings:
    """Return the active settings, loading them from the environment once."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = GuardSettings.from_env()
        logger.debug("Loaded guard settings: %s", _SETTINGS)
    return _SETTINGS


def configure(**overrides: Any) -> GuardSettings:
    """Replace selected settings and return the new settings object."""

    global _SETTINGS
    known = {f.name for f in fields(GuardSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigurationError(
            f"Unknown guard setting(s): {sorted(unknown)}; expected any of {sorted(known)}"
        )
    for key, value in overrides.items():
        if not isinstance(value, bool):
            raise ConfigurationError(f"Guard setting '{key}' must be a bool, got {type(value).__name__}")

    _SETTINGS = replace(get_settings(), **overrides)
    logger.debug("Guard settings reconfigured: %s", _SETTINGS)
    return _SETTINGS


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None


__all__ = [
    "GuardSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
