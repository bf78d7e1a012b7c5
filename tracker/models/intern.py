from datetime import datetime, date
from sqlalchemy import Integer, String, DateTime, Date, Enum, func
from sqlalchemy.orm import Mapped, mapped_column
import enum

from tracker.db.base import Base


class InternRole(str, enum.Enum):
    intern = "intern"
    admin = "admin"


class Intern(Base):
    __tablename__ = "interns"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    intern_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        Enum(InternRole, name="intern_role_enum"), nullable=False, default=InternRole.intern
    )
    joining_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
