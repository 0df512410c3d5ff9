"""Parsed resume models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ResumeSection = Literal["summary", "experience", "skills", "education", "projects", "certifications"]

REQUIRED_SECTIONS: tuple[ResumeSection, ...] = ("summary", "experience", "skills", "education")


class DateRange(BaseModel):
    """A date span found in free text, e.g. "Jan 2020 - Present"."""

    model_config = ConfigDict(frozen=True)

    raw: str
    start: str
    end: str  # "present" for open-ended ranges
    duration_in_months: int | None = None


class ExperienceEntry(BaseModel):
    """Work experience entry assembled line by line from the experience section."""

    title: str | None = None
    company: str | None = None
    location: str | None = None
    dates: DateRange | None = None
    description: str = ""


class ParsedResume(BaseModel):
    """Structured view of a resume. Built once per analysis, never mutated."""

    model_config = ConfigDict(frozen=True)

    raw: str
    normalized_text: str
    detected_sections: tuple[ResumeSection, ...] = ()
    section_content: dict[str, str] = Field(default_factory=dict)
    skills: tuple[str, ...] = ()
    job_titles: tuple[str, ...] = ()
    action_verbs: tuple[str, ...] = ()
    education_entries: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    total_experience_years: float = 0.0
    keywords: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
