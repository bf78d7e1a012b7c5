"""
Activity repositories — where the engine's input records come from.

The statistics and eligibility engines never touch storage; callers load
a subject's records through an ActivityRepository and hand the list over.

Both implementations share the same save semantics: records are merged
by day, a day that is already stored is kept, new days are added.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Protocol

from sqlalchemy.orm import Session

from tracker.db.base import enum_value
from tracker.models.activity import Activity, ActivityCategory, ActivitySource
from tracker.services.records import ActivityRecord, parse_day


def activity_to_record(activity: Activity) -> ActivityRecord:
    """Map an ORM row to the engine's record shape."""
    return ActivityRecord(
        subject_id=activity.intern_id,
        day=activity.day,
        hours=float(activity.hours or 0),
        description=activity.description or "",
        category=enum_value(activity.category),
        proof_link=activity.proof_link,
    )

class ActivityRepository(Protocol):
    def load(self, subject_id: str) -> list[ActivityRecord]:
        ...

    def save(self, subject_id: str, records: Iterable[ActivityRecord]) -> int:
        """Merge records by day; return how many new days were stored."""
        ...

# ---------------------------------------------------------------------------
# SQL-backed
# ---------------------------------------------------------------------------

class SqlActivityRepository:
    """Repository over the `activities` table, one session per instance."""

    def __init__(self, db: Session, source: ActivitySource = ActivitySource.form):
        self.db = db
        self.source = source

    def load(self, subject_id: str) -> list[ActivityRecord]:
        rows = (
            self.db.query(Activity)
            .filter(Activity.intern_id == subject_id)
            .order_by(Activity.day.asc(), Activity.id.asc())
            .all()
        )
        return [activity_to_record(a) for a in rows]

    def save(self, subject_id: str, records: Iterable[ActivityRecord]) -> int:
        stored = {
            row.day
            for row in self.db.query(Activity.day).filter(Activity.intern_id == subject_id).all()
        }
        records = list(records)
        days = [parse_day(r.day) for r in records]
        written = 0
        for record, day in zip(records, days):
            if day in stored:
                continue
            self.db.add(Activity(
                intern_id=subject_id,
                day=day,
                hours=Decimal(str(record.hours or 0)),
                category=record.category or ActivityCategory.learning.value,
                description=record.description or "",
                proof_link=record.proof_link,
                source=self.source,
            ))
            stored.add(day)
            written += 1
        if written:
            self.db.commit()
        return written

# ---------------------------------------------------------------------------
# In-memory (offline cache, tests)
# ---------------------------------------------------------------------------

class InMemoryActivityRepository:
    """Dict-backed repository keyed by subject id."""

    def __init__(self, initial: dict[str, list[ActivityRecord]] | None = None):
        self._records: dict[str, list[ActivityRecord]] = {
            k: list(v) for k, v in (initial or {}).items()
        }

    def load(self, subject_id: str) -> list[ActivityRecord]:
        return list(self._records.get(subject_id, []))

    def save(self, subject_id: str, records: Iterable[ActivityRecord]) -> int:
        current = self._records.setdefault(subject_id, [])
        stored = {parse_day(r.day) for r in current}
        records = list(records)
        days = [parse_day(r.day) for r in records]
        written = 0
        for record, day in zip(records, days):
            if day in stored:
                continue
            current.append(record)
            stored.add(day)
            written += 1
        return written
