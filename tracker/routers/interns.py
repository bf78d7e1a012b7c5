"""
Intern directory router.

GET  /interns
POST /interns
GET  /interns/{intern_id}
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tracker.db.base import enum_value, get_db
from tracker.models.intern import Intern
from tracker.schemas.common import ErrorResponse
from tracker.schemas.intern import InternCreateRequest, InternResponse
from tracker.services.interns import create_intern, get_intern, list_interns

router = APIRouter(prefix="/interns", tags=["interns"])


def _intern_to_response(intern: Intern) -> InternResponse:
    return InternResponse(
        id=intern.id,
        intern_id=intern.intern_id,
        name=intern.name,
        email=intern.email,
        role=enum_value(intern.role),
        joining_date=str(intern.joining_date),
    )

@router.get(
    "",
    response_model=list[InternResponse],
    summary="Intern directory",
)
def interns_list(db: Session = Depends(get_db)):
    """All registered interns and admins, ordered by name."""
    return [_intern_to_response(i) for i in list_interns(db)]

@router.post(
    "",
    response_model=InternResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an intern",
    responses={409: {"model": ErrorResponse, "description": "Intern id already registered."}},
)
def interns_create(payload: InternCreateRequest, db: Session = Depends(get_db)):
    intern = create_intern(
        db=db,
        intern_id=payload.intern_id,
        name=payload.name,
        email=payload.email,
        role=payload.role,
        joining_date=payload.joining_date,
    )
    return _intern_to_response(intern)

@router.get(
    "/{intern_id}",
    response_model=InternResponse,
    summary="Look up one intern",
    responses={404: {"model": ErrorResponse, "description": "Unknown intern id."}},
)
def interns_get(intern_id: str, db: Session = Depends(get_db)):
    """`intern_id` is matched case-insensitively."""
    return _intern_to_response(get_intern(db, intern_id))
