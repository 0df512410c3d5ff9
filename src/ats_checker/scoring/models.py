"""Pydantic models for deterministic scoring."""

from pydantic import BaseModel, Field

from ats_checker.models.result import ATSBreakdown


class ScoreComputation(BaseModel):
    """Composite score plus the gaps the suggestion engine explains."""

    score: float = Field(ge=0, le=100)  # Weighted composite, before penalties
    breakdown: ATSBreakdown

    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    overused_keywords: list[str] = Field(default_factory=list)

    missing_skills: list[str] = Field(default_factory=list)
    required_experience_years: int | None = None
    missing_experience_years: float = 0.0
    education_score: float = 100.0
    unmet_education: list[str] = Field(default_factory=list)
