"""
Activity — one daily submission by one intern.

At most one row per (intern_id, day); the unique constraint is the final
guard behind the duplicate check in app code.
"""
from datetime import datetime, date
from decimal import Decimal
from sqlalchemy import Integer, String, Text, Numeric, DateTime, Date, Enum, ForeignKey, func, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
import enum

from tracker.db.base import Base


class ActivityCategory(str, enum.Enum):
    learning = "Learning"
    practice = "Practice"
    assignment = "Assignment"
    project = "Project"
    research = "Research"


class ActivitySource(str, enum.Enum):
    form = "form"
    sheet = "sheet"


class Activity(Base):
    __tablename__ = "activities"
    __table_args__ = (
        UniqueConstraint("intern_id", "day", name="uq_activity_intern_day"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    intern_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("interns.intern_id", ondelete="CASCADE"), nullable=False, index=True
    )
    day: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    hours: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False, default=0)
    category: Mapped[str] = mapped_column(
        Enum(ActivityCategory, name="activity_category_enum",
             values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ActivityCategory.learning,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    proof_link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    source: Mapped[str] = mapped_column(
        Enum(ActivitySource, name="activity_source_enum"), nullable=False, default=ActivitySource.form
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
