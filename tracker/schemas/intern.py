"""
Intern directory schemas.

POST /interns          → InternCreateRequest → InternResponse
GET  /interns          → list[InternResponse]
"""
from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tracker.models.intern import InternRole


class InternCreateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    intern_id: Annotated[str, Field(
        min_length=1,
        max_length=64,
        description="Program id. Stored upper-case.",
        examples=["INT-1001"],
    )]
    name: Annotated[str, Field(min_length=1, max_length=255, examples=["Asha Rao"])]
    email: Optional[str] = Field(
        default=None,
        description="Defaults to <intern_id>@<DEFAULT_EMAIL_DOMAIN>.",
    )
    role: InternRole = InternRole.intern
    joining_date: Optional[date] = Field(
        default=None,
        description="Defaults to the program start date from settings.",
        examples=["2024-05-01"],
    )

    @field_validator("intern_id", "name", mode="before")
    @classmethod
    def strip_and_check_empty(cls, v: str) -> str:
        stripped = v.strip() if isinstance(v, str) else v
        if not stripped:
            raise ValueError("must not be empty after stripping whitespace")
        return stripped


class InternResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    intern_id: str
    name: str
    email: str
    role: str
    joining_date: str
