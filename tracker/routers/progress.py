"""
Progress router — certification statistics and eligibility.

GET /progress/{intern_id}   — one intern's statistics + eligibility
GET /progress               — admin cohort overview
GET /policy                 — thresholds currently applied
"""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tracker.core.config import settings
from tracker.db.base import get_db
from tracker.schemas.common import ErrorResponse
from tracker.schemas.progress import (
    CohortOverviewResponse,
    EligibilityResponse,
    InternProgressResponse,
    PolicyResponse,
    StatisticsResponse,
)
from tracker.services.interns import get_intern
from tracker.services.progress import (
    CohortOverview,
    InternProgress,
    get_cohort_overview,
    get_intern_progress,
)
from tracker.services.records import PolicyConfig
from tracker.services.repository import ActivityRepository, SqlActivityRepository

router = APIRouter(tags=["progress"])


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def get_activity_repository(db: Session = Depends(get_db)) -> ActivityRepository:
    return SqlActivityRepository(db)


def get_policy() -> PolicyConfig:
    return settings.policy


def _today() -> date:
    return datetime.now(tz=timezone.utc).date()


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------

def _progress_to_response(p: InternProgress) -> InternProgressResponse:
    return InternProgressResponse(
        intern_id=p.intern_id,
        name=p.name,
        joining_date=str(p.joining_date),
        today=str(p.today),
        statistics=StatisticsResponse(
            total_active_days=p.statistics.total_active_days,
            average_hours=p.statistics.average_hours,
            current_streak=p.statistics.current_streak,
            total_submissions=p.statistics.total_submissions,
        ),
        eligibility=EligibilityResponse(
            is_eligible=p.eligibility.is_eligible,
            active_days=p.eligibility.active_days,
            average_hours=p.eligibility.average_hours,
            max_gap_days=p.eligibility.max_gap_days,
            reasons=list(p.eligibility.reasons),
        ),
    )


def _overview_to_response(o: CohortOverview) -> CohortOverviewResponse:
    return CohortOverviewResponse(
        today=str(o.today),
        total_interns=o.total_interns,
        eligible_count=o.eligible_count,
        active_today=o.active_today,
        interns=[_progress_to_response(p) for p in o.interns],
    )


# ---------------------------------------------------------------------------
# GET /progress/{intern_id}
# ---------------------------------------------------------------------------

@router.get(
    "/progress/{intern_id}",
    response_model=InternProgressResponse,
    summary="Statistics and certification eligibility for one intern",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown intern id."},
        422: {"model": ErrorResponse, "description": "A stored day could not be parsed."},
    },
)
def progress_for_intern(
    intern_id: str,
    today: Optional[date] = Query(
        default=None,
        description="Day the streak is evaluated against. Defaults to today (UTC).",
        examples=["2026-02-21"],
    ),
    db: Session = Depends(get_db),
    repo: ActivityRepository = Depends(get_activity_repository),
    policy: PolicyConfig = Depends(get_policy),
):
    """
    ### Statistics
    Active days, average hours per active day, current streak (ending
    today or yesterday) and raw submission count.

    ### Eligibility
    Certified when all hold:
    1. **active days ≥ MIN_ACTIVE_DAYS**
    2. **average hours ≥ MIN_AVERAGE_HOURS_PER_DAY**
    3. **worst gap ≤ MAX_ALLOWED_GAP_DAYS**

    `reasons` lists each unmet requirement as display text.
    """
    intern = get_intern(db, intern_id)
    result = get_intern_progress(repo, intern, today or _today(), policy)
    return _progress_to_response(result)


# ---------------------------------------------------------------------------
# GET /progress
# ---------------------------------------------------------------------------

@router.get(
    "/progress",
    response_model=CohortOverviewResponse,
    summary="Cohort overview (admin)",
)
def progress_overview(
    today: Optional[date] = Query(
        default=None,
        description="Day the streaks are evaluated against. Defaults to today (UTC).",
    ),
    eligible_only: bool = Query(
        default=False,
        description="Only list interns that currently qualify.",
    ),
    search: Optional[str] = Query(
        default=None,
        description="Case-insensitive substring of the intern name or id.",
        examples=["ravi"],
    ),
    db: Session = Depends(get_db),
    repo: ActivityRepository = Depends(get_activity_repository),
    policy: PolicyConfig = Depends(get_policy),
):
    """
    Progress for every intern (admins excluded).

    `total_interns`, `eligible_count` and `active_today` count the whole
    cohort; `eligible_only` and `search` only filter the `interns` list.
    """
    result = get_cohort_overview(
        db=db,
        repo=repo,
        today=today or _today(),
        policy=policy,
        eligible_only=eligible_only,
        search=search,
    )
    return _overview_to_response(result)


# ---------------------------------------------------------------------------
# GET /policy
# ---------------------------------------------------------------------------

@router.get(
    "/policy",
    response_model=PolicyResponse,
    summary="Certification thresholds in effect",
)
def policy_current(policy: PolicyConfig = Depends(get_policy)):
    return PolicyResponse(
        min_active_days=policy.min_active_days,
        min_average_hours_per_day=policy.min_average_hours_per_day,
        max_allowed_gap_days=policy.max_allowed_gap_days,
        duplicate_hours=policy.duplicate_hours.value,
    )
