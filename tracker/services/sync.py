"""
Spreadsheet import: interns and activities from the program sheet.

Rows are read through a FieldResolver, so loosely-named columns still map
to the right fields. Each row is handled on its own: a row that cannot be
read is counted as skipped and the import carries on.

  interns     — created when the id is new; existing interns are untouched
  activities  — merged by day through SqlActivityRepository (a day that
                already has a record keeps it)
"""
from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy.orm import Session

from tracker.core.config import settings
from tracker.core.errors import EmptyImportError, MalformedDateError
from tracker.models.activity import ActivityCategory, ActivitySource
from tracker.services.field_resolution import FieldResolver, FuzzyFieldResolver
from tracker.services.interns import build_intern, find_intern, normalize_intern_id
from tracker.services.records import ActivityRecord, parse_day
from tracker.services.repository import SqlActivityRepository

logger = logging.getLogger(__name__)

_CATEGORY_BY_NAME = {c.value.lower(): c for c in ActivityCategory}

MAX_HOURS_PER_DAY = 24


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass
class ImportResult:
    interns_created: int = 0
    interns_skipped: int = 0
    activities_created: int = 0
    activities_skipped: int = 0
    errors: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Row readers
# ---------------------------------------------------------------------------

def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _hours(value: Any) -> float:
    """Same bounds as a form submission: 0 to 24, finite."""
    if value is None or _text(value) == "":
        return 0.0
    hours = float(_text(value))
    if not (math.isfinite(hours) and 0 <= hours <= MAX_HOURS_PER_DAY):
        raise ValueError(f"hours out of range: {value!r}")
    return hours


def normalize_category(value: Any) -> str:
    """Map free text onto a known category; unknown text becomes Learning."""
    category = _CATEGORY_BY_NAME.get(_text(value).lower(), ActivityCategory.learning)
    return category.value


def read_intern_row(row: Mapping[str, Any], resolver: FieldResolver) -> Optional[dict]:
    """Return intern fields, or None when the row carries no intern id."""
    intern_id = _text(resolver.resolve(row, "Intern ID", "ID"))
    if not intern_id:
        return None
    # An empty "Student Name" column falls through to the next candidate.
    name = (
        _text(resolver.resolve(row, "Student Name"))
        or _text(resolver.resolve(row, "Full Name"))
        or _text(row.get("name"))
    )
    return {
        "intern_id": normalize_intern_id(intern_id),
        "name": name or "Unknown",
        "email": _text(resolver.resolve(row, "Email")) or None,
    }


def read_activity_row(row: Mapping[str, Any], resolver: FieldResolver) -> ActivityRecord:
    """Raises ValueError / MalformedDateError when the row is unusable."""
    intern_id = _text(resolver.resolve(row, "Intern ID", "internId"))
    if not intern_id:
        raise ValueError("missing intern id")
    day = parse_day(_text(resolver.resolve(row, "Date", "Day")))
    return ActivityRecord(
        subject_id=normalize_intern_id(intern_id),
        day=day,
        hours=_hours(resolver.resolve(row, "Hours")),
        description=_text(resolver.resolve(row, "Description")),
        category=normalize_category(resolver.resolve(row, "Category")),
        proof_link=_text(resolver.resolve(row, "Proof Link", "proofLink")) or None,
    )


# ---------------------------------------------------------------------------
# Public — import
# ---------------------------------------------------------------------------

def import_sheet(
    db: Session,
    intern_rows: Sequence[Mapping[str, Any]],
    activity_rows: Sequence[Mapping[str, Any]],
    resolver: Optional[FieldResolver] = None,
    joining_date: Optional[date] = None,
) -> ImportResult:
    if not intern_rows and not activity_rows:
        raise EmptyImportError()

    resolver = resolver or FuzzyFieldResolver()
    result = ImportResult()

    # --- interns ---
    for row in intern_rows:
        fields = read_intern_row(row, resolver)
        if fields is None or find_intern(db, fields["intern_id"]) is not None:
            result.interns_skipped += 1
            continue
        db.add(build_intern(
            intern_id=fields["intern_id"],
            name=fields["name"],
            email=fields["email"],
            joining_date=joining_date or settings.DEFAULT_JOINING_DATE,
        ))
        db.flush()
        result.interns_created += 1
    db.commit()

    # --- activities ---
    by_intern: dict[str, list[ActivityRecord]] = defaultdict(list)
    for index, row in enumerate(activity_rows):
        try:
            record = read_activity_row(row, resolver)
        except (ValueError, MalformedDateError) as exc:
            logger.warning("Skipping activity row %d: %s", index, exc)
            result.activities_skipped += 1
            result.errors.append(f"activities[{index}]: {exc}")
            continue
        if find_intern(db, record.subject_id) is None:
            logger.warning("Skipping activity row %d: unknown intern %s", index, record.subject_id)
            result.activities_skipped += 1
            result.errors.append(f"activities[{index}]: unknown intern {record.subject_id}")
            continue
        by_intern[record.subject_id].append(record)

    repo = SqlActivityRepository(db, source=ActivitySource.sheet)
    for intern_id, records in by_intern.items():
        written = repo.save(intern_id, records)
        result.activities_created += written
        result.activities_skipped += len(records) - written

    logger.info(
        "Sheet import done interns=+%d activities=+%d skipped=%d",
        result.interns_created,
        result.activities_created,
        result.interns_skipped + result.activities_skipped,
    )
    return result
