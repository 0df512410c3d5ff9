"""Utility functions for ATS Checker."""

from ats_checker.utils.date_utils import parse_date_range, sum_experience_years
from ats_checker.utils.skills import expand_aliases, normalize_skill, normalize_skills
from ats_checker.utils.text import clamp, normalize_whitespace, tokenize, unique

__all__ = [
    "clamp",
    "expand_aliases",
    "normalize_skill",
    "normalize_skills",
    "normalize_whitespace",
    "parse_date_range",
    "sum_experience_years",
    "tokenize",
    "unique",
]
