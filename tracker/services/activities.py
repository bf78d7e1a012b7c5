"""
Activity submissions.

Public API
----------
submit_activity(db, intern_id, ...)     -> Activity   (one per intern per day)
list_activities(db, intern_id=None)     -> list[Activity]
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tracker.core.errors import DuplicateSubmissionError
from tracker.models.activity import Activity, ActivityCategory, ActivitySource
from tracker.services.interns import get_intern, normalize_intern_id

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(tz=timezone.utc).date()


def _exists(db: Session, intern_id: str, day: date) -> bool:
    return (
        db.query(Activity.id)
        .filter(Activity.intern_id == intern_id, Activity.day == day)
        .first()
        is not None
    )


def submit_activity(
    db: Session,
    intern_id: str,
    hours: float | Decimal,
    description: str,
    category: ActivityCategory = ActivityCategory.learning,
    proof_link: Optional[str] = None,
    day: Optional[date] = None,
) -> Activity:
    """
    Record one intern's activity for a day (defaults to today, UTC).
    Raises InternNotFoundError for unknown interns and
    DuplicateSubmissionError when the day already has a record.
    """
    intern = get_intern(db, intern_id)
    target = day or _today()

    if _exists(db, intern.intern_id, target):
        raise DuplicateSubmissionError(intern.intern_id, target)

    activity = Activity(
        intern_id=intern.intern_id,
        day=target,
        hours=Decimal(str(hours)),
        category=category,
        description=description,
        proof_link=proof_link,
        source=ActivitySource.form,
    )
    db.add(activity)
    try:
        db.commit()
    except IntegrityError:
        # Another request stored the same (intern, day) first
        db.rollback()
        raise DuplicateSubmissionError(intern.intern_id, target) from None

    db.refresh(activity)
    logger.info(
        "Activity stored intern=%s day=%s hours=%s", intern.intern_id, target, activity.hours
    )
    return activity


def list_activities(db: Session, intern_id: Optional[str] = None) -> list[Activity]:
    """Newest first."""
    q = db.query(Activity)
    if intern_id:
        q = q.filter(Activity.intern_id == normalize_intern_id(intern_id))
    return q.order_by(Activity.day.desc(), Activity.id.desc()).all()
