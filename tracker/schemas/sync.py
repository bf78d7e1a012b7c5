"""
Spreadsheet import schemas.

POST /sync/import → SheetImportRequest → SheetImportResponse
"""
from typing import Any, Optional
from datetime import date

from pydantic import BaseModel, Field


class SheetImportRequest(BaseModel):
    """Raw rows as exported by the program sheet; column names are free-form."""
    interns: list[dict[str, Any]] = Field(
        default_factory=list,
        examples=[[{"Student Name": "Asha Rao", "Intern ID #": "int-1001"}]],
    )
    activities: list[dict[str, Any]] = Field(
        default_factory=list,
        examples=[[{"Intern ID": "INT-1001", "Date": "2026-02-20", "Hours": 3}]],
    )
    joining_date: Optional[date] = Field(
        default=None,
        description="Joining date for newly created interns.",
    )


class SheetImportResponse(BaseModel):
    interns_created: int
    interns_skipped: int
    activities_created: int
    activities_skipped: int
    errors: list[str] = Field(description="One line per skipped activity row.")
