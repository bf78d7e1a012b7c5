"""
Statistics calculator — usage metrics for one intern's activity records.

  total_active_days  distinct calendar days with at least one record
  average_hours      total hours / active days
  current_streak     consecutive days ending today or yesterday
  total_submissions  raw record count, duplicate days included

Pure function of (records, today). No DB, no clock.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from tracker.services.records import (
    ActivityRecord,
    DuplicateHours,
    current_streak,
    parse_days,
    total_hours,
)


@dataclass(frozen=True)
class Statistics:
    total_active_days: int
    average_hours: float
    current_streak: int
    total_submissions: int


EMPTY_STATISTICS = Statistics(
    total_active_days=0,
    average_hours=0.0,
    current_streak=0,
    total_submissions=0,
)


def compute_statistics(
    records: Sequence[ActivityRecord],
    today: date,
    duplicate_hours: DuplicateHours = DuplicateHours.sum,
) -> Statistics:
    """
    Compute usage statistics. `records` may be empty, unordered and hold
    several records for the same day; they are not filtered by subject.
    """
    if not records:
        return EMPTY_STATISTICS

    days = parse_days(records)
    distinct = set(days)
    active_days = len(distinct)

    return Statistics(
        total_active_days=active_days,
        average_hours=total_hours(records, days, duplicate_hours) / active_days,
        current_streak=current_streak(distinct, today),
        total_submissions=len(records),
    )
