"""
Sync router — import rows from the program spreadsheet.

POST /sync/import
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tracker.db.base import get_db
from tracker.schemas.common import ErrorResponse
from tracker.schemas.sync import SheetImportRequest, SheetImportResponse
from tracker.services.field_resolution import ExactFieldResolver, FuzzyFieldResolver
from tracker.services.sync import import_sheet

router = APIRouter(prefix="/sync", tags=["sync"])


@router.post(
    "/import",
    response_model=SheetImportResponse,
    summary="Import interns and activities from sheet rows",
    responses={422: {"model": ErrorResponse, "description": "Empty payload or validation error."}},
)
def sync_import(
    payload: SheetImportRequest,
    fuzzy: bool = Query(
        default=True,
        description="Match column names loosely (\"Intern ID #\" → intern id).",
    ),
    db: Session = Depends(get_db),
):
    """
    Import raw sheet rows. New interns are created; activities are merged
    by day, so a day that already has a record keeps it. Rows that cannot
    be read are skipped and listed in `errors`.
    """
    resolver = FuzzyFieldResolver() if fuzzy else ExactFieldResolver()
    result = import_sheet(
        db=db,
        intern_rows=payload.interns,
        activity_rows=payload.activities,
        resolver=resolver,
        joining_date=payload.joining_date,
    )
    return SheetImportResponse(
        interns_created=result.interns_created,
        interns_skipped=result.interns_skipped,
        activities_created=result.activities_created,
        activities_skipped=result.activities_skipped,
        errors=result.errors,
    )
