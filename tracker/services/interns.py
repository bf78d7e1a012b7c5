"""
Intern directory: register, look up and list interns.

Intern ids are case-normalized here (strip + upper-case) so every other
layer can compare them verbatim.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from tracker.core.config import settings
from tracker.core.errors import InternAlreadyExistsError, InternNotFoundError
from tracker.models.intern import Intern, InternRole


def normalize_intern_id(intern_id: str) -> str:
    return str(intern_id).strip().upper()


def find_intern(db: Session, intern_id: str) -> Optional[Intern]:
    return (
        db.query(Intern)
        .filter(Intern.intern_id == normalize_intern_id(intern_id))
        .first()
    )


def get_intern(db: Session, intern_id: str) -> Intern:
    intern = find_intern(db, intern_id)
    if intern is None:
        raise InternNotFoundError(normalize_intern_id(intern_id))
    return intern


def list_interns(db: Session, role: Optional[InternRole] = None) -> list[Intern]:
    q = db.query(Intern)
    if role is not None:
        q = q.filter(Intern.role == role)
    return q.order_by(Intern.name.asc(), Intern.intern_id.asc()).all()


def build_intern(
    intern_id: str,
    name: str,
    email: Optional[str] = None,
    role: InternRole = InternRole.intern,
    joining_date: Optional[date] = None,
) -> Intern:
    """Build (but do not persist) an Intern with defaults applied."""
    normalized = normalize_intern_id(intern_id)
    return Intern(
        intern_id=normalized,
        name=name.strip() or "Unknown",
        email=email or f"{normalized.lower()}@{settings.DEFAULT_EMAIL_DOMAIN}",
        role=role,
        joining_date=joining_date or settings.DEFAULT_JOINING_DATE,
    )


def create_intern(
    db: Session,
    intern_id: str,
    name: str,
    email: Optional[str] = None,
    role: InternRole = InternRole.intern,
    joining_date: Optional[date] = None,
) -> Intern:
    if find_intern(db, intern_id) is not None:
        raise InternAlreadyExistsError(normalize_intern_id(intern_id))
    intern = build_intern(intern_id, name, email, role, joining_date)
    db.add(intern)
    db.commit()
    db.refresh(intern)
    return intern
