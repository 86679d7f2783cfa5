# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter shared by the library's instruments."""

from __future__ import annotations

from opentelemetry import metrics

METER_NAME = "guards"

meter = metrics.get_meter(METER_NAME)

__all__ = ["METER_NAME", "meter"]
