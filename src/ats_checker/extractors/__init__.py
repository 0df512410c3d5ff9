"""Extractors for resume and job description data."""

from ats_checker.extractors.job_extractor import JobExtractor, parse_job_description
from ats_checker.extractors.resume_extractor import ResumeExtractor, parse_resume

__all__ = ["JobExtractor", "ResumeExtractor", "parse_job_description", "parse_resume"]
