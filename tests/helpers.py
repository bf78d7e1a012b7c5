"""Record builders shared by the engine tests."""
from datetime import date, timedelta

from tracker.services.records import ActivityRecord


def make_record(day, hours: float = 3.0, subject_id: str = "INT-0001") -> ActivityRecord:
    return ActivityRecord(subject_id=subject_id, day=day, hours=hours)


def make_run(start: date, count: int, hours: float = 3.0, skip=()) -> list[ActivityRecord]:
    """One record per calendar day for `count` days from `start`, minus `skip` offsets."""
    return [
        make_record(start + timedelta(days=i), hours)
        for i in range(count)
        if i not in skip
    ]
