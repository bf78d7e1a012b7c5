"""
Progress schemas.

GET /progress/{intern_id}  → InternProgressResponse
GET /progress              → CohortOverviewResponse
GET /policy                → PolicyResponse
"""
from pydantic import BaseModel, Field


class StatisticsResponse(BaseModel):
    total_active_days: int = Field(description="Distinct days with at least one record.")
    average_hours: float = Field(description="Total hours / active days.")
    current_streak: int = Field(
        description="Consecutive active days ending today or yesterday."
    )
    total_submissions: int = Field(description="Raw record count.")


class EligibilityResponse(BaseModel):
    is_eligible: bool
    active_days: int
    average_hours: float
    max_gap_days: int = Field(
        description="Most empty days between two consecutive active days."
    )
    reasons: list[str] = Field(
        description="Display text for each unmet requirement. Empty when eligible."
    )


class InternProgressResponse(BaseModel):
    intern_id: str
    name: str
    joining_date: str
    today: str = Field(description="Date the streak was evaluated against.")
    statistics: StatisticsResponse
    eligibility: EligibilityResponse


class CohortOverviewResponse(BaseModel):
    today: str
    total_interns: int
    eligible_count: int
    active_today: int = Field(description="Submissions dated `today` across the cohort.")
    interns: list[InternProgressResponse]


class PolicyResponse(BaseModel):
    min_active_days: int
    min_average_hours_per_day: float
    max_allowed_gap_days: int
    duplicate_hours: str = Field(description='"sum" or "last".')
