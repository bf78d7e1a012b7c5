"""
Eligibility evaluator — certification verdict for one intern.

Checks, always in this order, each producing one display reason when
violated:
  1. active days         >= policy.min_active_days
  2. average hours/day   >= policy.min_average_hours_per_day
  3. worst gap (days)    <= policy.max_allowed_gap_days

A subject with no active day is never eligible, even under a policy that
asks for zero days.

`joining_date` is validated but does not restrict which records count.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from tracker.services.records import (
    ActivityRecord,
    DayLike,
    PolicyConfig,
    max_gap_days,
    parse_day,
    parse_days,
    total_hours,
)


@dataclass(frozen=True)
class EligibilityResult:
    is_eligible: bool
    active_days: int
    average_hours: float
    max_gap_days: int
    reasons: list[str] = field(default_factory=list)


def _reasons(
    active_days: int,
    average_hours: float,
    max_gap: int,
    policy: PolicyConfig,
) -> list[str]:
    reasons: list[str] = []
    if active_days < policy.min_active_days:
        reasons.append(
            f"Requires {policy.min_active_days} active days (Current: {active_days})"
        )
    if average_hours < policy.min_average_hours_per_day:
        reasons.append(
            f"Average hours must be ≥ {policy.min_average_hours_per_day:g} "
            f"(Current: {average_hours:.1f})"
        )
    if max_gap > policy.max_allowed_gap_days:
        reasons.append(
            f"Maximum gap exceeded {policy.max_allowed_gap_days} consecutive days "
            f"(Worst gap: {max_gap} days)"
        )
    return reasons


def evaluate_eligibility(
    records: Sequence[ActivityRecord],
    joining_date: Optional[DayLike],
    policy: PolicyConfig,
) -> EligibilityResult:
    """Evaluate the certification verdict for one subject's records."""
    if joining_date is not None:
        parse_day(joining_date)

    days = parse_days(records)
    # Stable sort keeps same-day records in input order.
    ordered = sorted(zip(days, records), key=lambda pair: pair[0])
    sorted_days = [d for d, _ in ordered]

    active_days = len(set(sorted_days))
    average_hours = (
        total_hours(
            [r for _, r in ordered], sorted_days, policy.duplicate_hours
        ) / active_days
        if active_days > 0
        else 0.0
    )
    max_gap = max_gap_days(sorted_days)

    reasons = _reasons(active_days, average_hours, max_gap, policy)
    return EligibilityResult(
        is_eligible=not reasons and active_days > 0,
        active_days=active_days,
        average_hours=average_hours,
        max_gap_days=max_gap,
        reasons=reasons,
    )
