"""
Activities router.

POST /activities     — submit one day's activity (one per intern per day)
GET  /activities     — list, newest first, optional intern filter
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tracker.db.base import enum_value, get_db
from tracker.models.activity import Activity
from tracker.schemas.activity import ActivityCreateRequest, ActivityResponse
from tracker.schemas.common import ErrorResponse
from tracker.services.activities import list_activities, submit_activity

router = APIRouter(prefix="/activities", tags=["activities"])


def _activity_to_response(a: Activity) -> ActivityResponse:
    return ActivityResponse(
        id=a.id,
        intern_id=a.intern_id,
        day=str(a.day),
        hours=float(a.hours),
        category=enum_value(a.category),
        description=a.description,
        proof_link=a.proof_link,
        source=enum_value(a.source),
        created_at=a.created_at.isoformat() if a.created_at else "",
    )

@router.post(
    "",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a daily activity",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown intern id."},
        409: {"model": ErrorResponse, "description": "A record for that day already exists."},
        422: {"model": ErrorResponse, "description": "Validation error."},
    },
)
def activities_submit(payload: ActivityCreateRequest, db: Session = Depends(get_db)):
    """
    Store one intern's work log for a day (defaults to today, UTC).

    Only one submission per intern per day is accepted; a second one for
    the same day returns **409 DUPLICATE_SUBMISSION**.
    """
    activity = submit_activity(
        db=db,
        intern_id=payload.intern_id,
        hours=payload.hours,
        description=payload.description,
        category=payload.category,
        proof_link=payload.proof_link,
        day=payload.day,
    )
    return _activity_to_response(activity)

@router.get(
    "",
    response_model=list[ActivityResponse],
    summary="List activities",
)
def activities_list(
    intern_id: Optional[str] = Query(
        default=None,
        description="Only this intern's activities (case-insensitive).",
        examples=["INT-1001"],
    ),
    db: Session = Depends(get_db),
):
    return [_activity_to_response(a) for a in list_activities(db, intern_id)]
