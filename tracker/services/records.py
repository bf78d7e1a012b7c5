"""
Activity record shape and the calendar helpers shared by the statistics
and eligibility engines.

Everything here is pure: no ORM, no Pydantic, no clock. Days are handled
as `datetime.date` values so day differences are whole calendar days.

Public API
----------
ActivityRecord, PolicyConfig, DuplicateHours
parse_day(value)                          -> date
parse_days(records)                       -> list[date]
total_hours(records, days, policy)        -> float
max_gap_days(days)                        -> int
current_streak(days, today)               -> int
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence, Union

from tracker.core.errors import MalformedDateError

DayLike = Union[date, str]


class DuplicateHours(str, enum.Enum):
    """How hours of several records on the same day feed the average."""
    sum = "sum"    # every record adds its hours; the day counts once
    last = "last"  # only the last record of the day (input order) counts


@dataclass(frozen=True)
class ActivityRecord:
    """One submission for one calendar day by one subject."""
    subject_id: str
    day: DayLike
    hours: float
    description: str = ""
    category: str = ""
    proof_link: Optional[str] = None


@dataclass(frozen=True)
class PolicyConfig:
    min_active_days: int
    min_average_hours_per_day: float
    max_allowed_gap_days: int
    duplicate_hours: DuplicateHours = DuplicateHours.sum


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_day(value) -> date:
    """
    Read a calendar date from a `date`, a `datetime` (date part only) or
    an ISO `YYYY-MM-DD` string. Raises MalformedDateError otherwise.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise MalformedDateError(value) from None
    raise MalformedDateError(value)


def parse_days(records: Iterable[ActivityRecord]) -> list[date]:
    """Parse every record's day up front so one bad record fails the call."""
    return [parse_day(r.day) for r in records]


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

def _hours(record: ActivityRecord) -> float:
    return float(record.hours or 0)


def total_hours(
    records: Sequence[ActivityRecord],
    days: Sequence[date],
    duplicate_hours: DuplicateHours = DuplicateHours.sum,
) -> float:
    """Numerator of the average: hours over all records, per duplicate policy."""
    if duplicate_hours == DuplicateHours.last:
        per_day: dict[date, float] = {}
        for record, day in zip(records, days):
            per_day[day] = _hours(record)
        return sum(per_day.values())
    return sum(_hours(r) for r in records)


def max_gap_days(days: Iterable[date]) -> int:
    """
    Largest number of empty calendar days strictly between two adjacent
    active days. Same-day neighbours contribute 0.
    """
    ordered = sorted(days)
    worst = 0
    for prev, curr in zip(ordered, ordered[1:]):
        gap = (curr - prev).days - 1
        if gap > worst:
            worst = gap
    return worst


def current_streak(days: Iterable[date], today: date) -> int:
    """
    Consecutive active days ending today or yesterday, walking backward
    until the first missing day. 0 when activity has lapsed.
    """
    ordered = sorted(set(days), reverse=True)
    if not ordered:
        return 0
    if ordered[0] not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    for newer, older in zip(ordered, ordered[1:]):
        if (newer - older).days != 1:
            break
        streak += 1
    return streak
