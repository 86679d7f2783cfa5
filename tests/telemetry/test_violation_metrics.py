# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import logging

import pytest

import guards
from guards import ConditionViolation, NullViolation, RangeViolation
from guards.telemetry import record_violation


def test_violation_is_counted(violation_counter):
    with pytest.raises(NullViolation):
        guards.is_not_null(None, "a")

    assert violation_counter.calls == [(1, {"check": "is_not_null", "kind": "NullViolation"})]


def test_composed_check_counts_failing_sub_check(violation_counter):
    with pytest.raises(RangeViolation):
        guards.is_in_range(12, 1, 3, "v")

    assert violation_counter.calls == [
        (1, {"check": "is_less_than_or_equal_to", "kind": "RangeViolation"})
    ]


def test_passing_checks_record_nothing(violation_counter):
    guards.is_not_null("x", "a")
    guards.is_in_range(2, 1, 3, "v")
    guards.is_true(True)

    assert violation_counter.calls == []


def test_metrics_can_be_disabled(violation_counter):
    guards.configure(record_metrics=False)

    with pytest.raises(ConditionViolation):
        guards.is_true(False)

    assert violation_counter.calls == []


def test_counter_failure_does_not_mask_violation(monkeypatch):
    import guards.telemetry.metrics as metrics

    class _Broken:
        def add(self, *_a, **_kw):
            raise RuntimeError("exporter down")

    monkeypatch.setattr(metrics, "guard_violation_total", _Broken())

    with pytest.raises(NullViolation):
        guards.is_not_null(None, "a")


def test_record_violation_direct_call(violation_counter):
    record_violation("is_true", "ConditionViolation")

    assert violation_counter.calls == [(1, {"check": "is_true", "kind": "ConditionViolation"})]


def test_violation_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="guards")

    with pytest.raises(RangeViolation):
        guards.is_greater_than(1, 2, "size")

    messages = [r.getMessage() for r in caplog.records if r.name == "guards.validation.base"]
    assert messages == [
        "Guard check 'is_greater_than' failed for argument 'size': "
        "Argument 'size' must be greater than '2' but was '1'."
    ]
