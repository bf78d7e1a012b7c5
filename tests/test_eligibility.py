"""
Tests for the eligibility evaluator (pure, no DB).

Policy used throughout unless stated: 90 active days, 3.0 h/day average,
gaps of at most 3 days.
"""
from __future__ import annotations

import pytest
from datetime import date

from tracker.core.errors import MalformedDateError
from tracker.services.eligibility import evaluate_eligibility
from tracker.services.records import DuplicateHours, PolicyConfig

from helpers import make_record, make_run

POLICY = PolicyConfig(
    min_active_days=90,
    min_average_hours_per_day=3.0,
    max_allowed_gap_days=3,
)
JOINED = date(2024, 1, 1)


class TestEligibleScenario:
    def test_95_days_over_100_calendar_days(self):
        # Five single-day holes: worst gap is 1 day
        records = make_run(JOINED, 100, hours=3.2, skip={10, 30, 50, 70, 90})
        assert len(records) == 95

        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.is_eligible is True
        assert result.reasons == []
        assert result.active_days == 95
        assert result.average_hours == pytest.approx(3.2)
        assert result.max_gap_days == 1

    def test_thresholds_are_inclusive(self):
        records = make_run(JOINED, 90, hours=3.0)
        records.append(make_record(date(2024, 4, 3), 3.0))  # 3-day gap after 2024-03-30
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.max_gap_days == 3
        assert result.is_eligible is True


class TestFailureReasons:
    def test_too_few_active_days(self):
        records = make_run(JOINED, 50, hours=4.0)
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.is_eligible is False
        assert result.reasons == ["Requires 90 active days (Current: 50)"]

    def test_low_average_hours(self):
        records = make_run(JOINED, 95, hours=2.0)
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.is_eligible is False
        assert result.reasons == ["Average hours must be ≥ 3 (Current: 2.0)"]

    def test_average_reported_with_one_decimal(self):
        records = make_run(JOINED, 95, hours=2.96)
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.reasons == ["Average hours must be ≥ 3 (Current: 3.0)"]

    def test_gap_too_large(self):
        records = make_run(JOINED, 100, hours=3.5, skip={40, 41, 42, 43})
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.max_gap_days == 4
        assert result.reasons == [
            "Maximum gap exceeded 3 consecutive days (Worst gap: 4 days)"
        ]

    def test_reasons_keep_fixed_order(self):
        records = [make_record("2024-01-10", 1), make_record("2024-01-01", 1)]
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert len(result.reasons) == 3
        assert result.reasons[0].startswith("Requires 90 active days")
        assert result.reasons[1].startswith("Average hours must be")
        assert result.reasons[2].startswith("Maximum gap exceeded")
        assert result.max_gap_days == 8


class TestGap:
    def test_gap_between_jan_1_and_jan_5_is_3(self):
        records = [make_record("2024-01-01"), make_record("2024-01-05")]
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.max_gap_days == 3

    def test_consecutive_days_have_no_gap(self):
        records = [make_record("2024-01-01"), make_record("2024-01-02")]
        assert evaluate_eligibility(records, JOINED, POLICY).max_gap_days == 0

    def test_same_day_duplicates_do_not_go_negative(self):
        records = [make_record("2024-01-01"), make_record("2024-01-01")]
        assert evaluate_eligibility(records, JOINED, POLICY).max_gap_days == 0

    def test_single_record_has_no_gap(self):
        assert evaluate_eligibility([make_record("2024-01-01")], JOINED, POLICY).max_gap_days == 0

    def test_unordered_input_is_sorted_first(self):
        records = [make_record(d) for d in ("2024-01-09", "2024-01-01", "2024-01-03")]
        assert evaluate_eligibility(records, JOINED, POLICY).max_gap_days == 5


class TestEmptyAndDegenerate:
    def test_empty_records_not_eligible(self):
        result = evaluate_eligibility([], JOINED, POLICY)
        assert result.is_eligible is False
        assert result.active_days == 0
        assert result.average_hours == 0.0
        assert result.max_gap_days == 0
        assert "Requires 90 active days (Current: 0)" in result.reasons

    def test_zero_threshold_policy_still_rejects_inactive_subject(self):
        policy = PolicyConfig(min_active_days=0, min_average_hours_per_day=0.0, max_allowed_gap_days=0)
        result = evaluate_eligibility([], JOINED, policy)
        assert result.reasons == []
        assert result.is_eligible is False

    def test_negative_thresholds_are_trivially_met(self):
        policy = PolicyConfig(min_active_days=-1, min_average_hours_per_day=-1.0, max_allowed_gap_days=10)
        result = evaluate_eligibility([make_record("2024-01-01", 0)], JOINED, policy)
        assert result.is_eligible is True


class TestDuplicateDays:
    def test_duplicates_do_not_inflate_active_days(self):
        records = [make_record("2024-01-01", 2), make_record("2024-01-01", 2)]
        result = evaluate_eligibility(records, JOINED, POLICY)
        assert result.active_days == 1
        assert result.average_hours == pytest.approx(4.0)

    def test_last_policy_keeps_last_record_of_the_day(self):
        policy = PolicyConfig(90, 3.0, 3, duplicate_hours=DuplicateHours.last)
        records = [make_record("2024-01-01", 2), make_record("2024-01-01", 5)]
        result = evaluate_eligibility(records, JOINED, policy)
        assert result.average_hours == pytest.approx(5.0)


class TestJoiningDate:
    def test_records_before_joining_still_count(self):
        records = [make_record("2023-12-30"), make_record("2023-12-31")]
        result = evaluate_eligibility(records, date(2024, 5, 1), POLICY)
        assert result.active_days == 2

    def test_joining_date_may_be_omitted(self):
        assert evaluate_eligibility([make_record("2024-01-01")], None, POLICY).active_days == 1

    def test_malformed_joining_date_raises(self):
        with pytest.raises(MalformedDateError):
            evaluate_eligibility([], "05/01/2024", POLICY)

    def test_malformed_record_day_raises(self):
        with pytest.raises(MalformedDateError):
            evaluate_eligibility([make_record("2024-02-30")], JOINED, POLICY)


class TestPurity:
    def test_same_inputs_same_result(self):
        records = make_run(JOINED, 30, hours=3.3, skip={5})
        assert evaluate_eligibility(records, JOINED, POLICY) == evaluate_eligibility(records, JOINED, POLICY)
