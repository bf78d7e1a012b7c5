"""
Activity submission schemas.

POST /activities  → ActivityCreateRequest → ActivityResponse
GET  /activities  → list[ActivityResponse]
"""
from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tracker.models.activity import ActivityCategory


class ActivityCreateRequest(BaseModel):
    """One day's work log."""

    intern_id: Annotated[str, Field(min_length=1, max_length=64, examples=["INT-1001"])]
    hours: Annotated[float, Field(
        ge=0,
        le=24,
        description="Hours worked that day.",
        examples=[3.5],
    )]
    category: ActivityCategory = Field(
        default=ActivityCategory.learning,
        examples=["Learning", "Practice", "Project"],
    )
    description: Annotated[str, Field(
        min_length=1,
        max_length=10_000,
        description="What was done. Stripped of leading/trailing whitespace.",
    )]
    proof_link: Optional[str] = Field(default=None, max_length=1024)
    day: Optional[date] = Field(
        default=None,
        description="ISO date of the work. Defaults to today (UTC).",
        examples=["2026-02-20"],
    )

    @field_validator("description", mode="before")
    @classmethod
    def strip_and_check_empty(cls, v: str) -> str:
        stripped = v.strip() if isinstance(v, str) else v
        if not stripped:
            raise ValueError("description must not be empty after stripping whitespace")
        return stripped


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    intern_id: str
    day: str = Field(description="ISO date of the activity.")
    hours: float
    category: str
    description: str
    proof_link: Optional[str] = None
    source: str = Field(description='"form" or "sheet".')
    created_at: str = Field(description="UTC timestamp of the submission.")
