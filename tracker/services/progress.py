"""
Progress service — statistics + eligibility per intern and per cohort.

Loads records through an ActivityRepository and runs both engines on the
same list. The engines themselves stay pure; `today` and the policy are
always passed in.

Public API
----------
get_intern_progress(repo, intern, today, policy)               -> InternProgress
get_cohort_overview(db, repo, today, policy, eligible_only, search)
                                                               -> CohortOverview
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from tracker.models.intern import Intern, InternRole
from tracker.services.eligibility import EligibilityResult, evaluate_eligibility
from tracker.services.interns import list_interns
from tracker.services.records import ActivityRecord, PolicyConfig, parse_day
from tracker.services.repository import ActivityRepository
from tracker.services.statistics import Statistics, compute_statistics


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class InternProgress:
    intern_id: str
    name: str
    joining_date: date
    today: date
    statistics: Statistics
    eligibility: EligibilityResult


@dataclass
class CohortOverview:
    today: date
    total_interns: int
    eligible_count: int
    active_today: int
    interns: list[InternProgress]


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

def _progress(
    intern: Intern,
    records: Sequence[ActivityRecord],
    today: date,
    policy: PolicyConfig,
) -> InternProgress:
    return InternProgress(
        intern_id=intern.intern_id,
        name=intern.name,
        joining_date=intern.joining_date,
        today=today,
        statistics=compute_statistics(records, today, policy.duplicate_hours),
        eligibility=evaluate_eligibility(records, intern.joining_date, policy),
    )


def get_intern_progress(
    repo: ActivityRepository,
    intern: Intern,
    today: date,
    policy: PolicyConfig,
) -> InternProgress:
    return _progress(intern, repo.load(intern.intern_id), today, policy)


def _matches(intern: Intern, search: str) -> bool:
    needle = search.lower()
    return needle in intern.name.lower() or needle in intern.intern_id.lower()


def get_cohort_overview(
    db: Session,
    repo: ActivityRepository,
    today: date,
    policy: PolicyConfig,
    eligible_only: bool = False,
    search: Optional[str] = None,
) -> CohortOverview:
    """
    Progress for every intern (admins excluded), ordered by name.

    `total_interns`, `eligible_count` and `active_today` always cover the
    whole cohort; `eligible_only` and `search` only narrow `interns`.
    """
    rows: list[tuple[Intern, InternProgress]] = []
    active_today = 0
    for intern in list_interns(db, role=InternRole.intern):
        records = repo.load(intern.intern_id)
        active_today += sum(1 for r in records if parse_day(r.day) == today)
        rows.append((intern, _progress(intern, records, today, policy)))

    eligible_count = sum(1 for _, p in rows if p.eligibility.is_eligible)
    listed = [
        p for intern, p in rows
        if (not eligible_only or p.eligibility.is_eligible)
        and (not search or _matches(intern, search))
    ]
    return CohortOverview(
        today=today,
        total_interns=len(rows),
        eligible_count=eligible_count,
        active_today=active_today,
        interns=listed,
    )
