"""Parsed job description model."""

from pydantic import BaseModel, ConfigDict


class ParsedJobDescription(BaseModel):
    """Requirements extracted from a job description."""

    model_config = ConfigDict(frozen=True)

    raw: str
    normalized_text: str

    # Required qualifications
    required_skills: tuple[str, ...] = ()
    preferred_skills: tuple[str, ...] = ()
    min_experience_years: int | None = None
    education_requirements: tuple[str, ...] = ()

    # Keywords
    role_keywords: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
