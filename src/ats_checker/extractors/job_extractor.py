"""Rule-based job description parsing."""

import logging
import re

from ats_checker.models.config import ResolvedATSConfig
from ats_checker.models.job_spec import ParsedJobDescription
from ats_checker.utils.education import extract_degree_requirements
from ats_checker.utils.skills import normalize_skills
from ats_checker.utils.text import normalize_whitespace, split_lines, tokenize, unique

logger = logging.getLogger(__name__)


class JobExtractor:
    """Extract requirements from raw job description text."""

    REQUIRED_PATTERN = re.compile(r"must|require|need", re.IGNORECASE)
    PREFERRED_PATTERN = re.compile(r"preferred|nice to have|plus", re.IGNORECASE)

    # Commas, semicolons, bullets, sentence periods and dash bullets
    FRAGMENT_SPLIT_PATTERN = re.compile(r"[,;•]|\.(?=\s|$)|(?:^|\s)[-*](?=\s)")
    LABEL_PREFIX_PATTERN = re.compile(r"^[^:]{0,40}:\s*")

    # Plural only: "4 year program" describes a degree, not experience
    MIN_EXPERIENCE_PATTERN = re.compile(r"(?<!\d)(\d{1,2})\+?\s*(?:years|yrs)\b", re.IGNORECASE)
    ROLE_PATTERN = re.compile(
        r"\b(engineer|developer|manager|scientist|analyst|designer|architect)s?\b",
        re.IGNORECASE,
    )

    def __init__(self, config: ResolvedATSConfig):
        self.config = config

    def extract(self, job_description: str) -> ParsedJobDescription:
        """Parse a job description.

        Args:
            job_description: Raw job posting text.

        Returns:
            ParsedJobDescription with skills, keywords and requirements.
        """
        normalized_text = normalize_whitespace(job_description)
        lines = split_lines(job_description)

        required = normalize_skills(
            self._fragments(lines, self.REQUIRED_PATTERN), self.config.skill_aliases
        )
        preferred = normalize_skills(
            self._fragments(lines, self.PREFERRED_PATTERN), self.config.skill_aliases
        )
        keywords = unique([*required, *preferred, *tokenize(normalized_text)])

        parsed = ParsedJobDescription(
            raw=job_description,
            normalized_text=normalized_text,
            required_skills=tuple(required),
            preferred_skills=tuple(preferred),
            min_experience_years=self.extract_min_experience(job_description),
            education_requirements=tuple(extract_degree_requirements(normalized_text)),
            role_keywords=tuple(self.extract_role_keywords(job_description)),
            keywords=tuple(keywords),
        )
        logger.debug(
            f"Parsed job: required={len(required)}, preferred={len(preferred)}, "
            f"min_years={parsed.min_experience_years}"
        )
        return parsed

    def _fragments(self, lines: list[str], marker: re.Pattern[str]) -> list[str]:
        """Split every line containing ``marker`` into candidate skill fragments."""
        fragments: list[str] = []
        for line in lines:
            if not marker.search(line):
                continue
            for fragment in self.FRAGMENT_SPLIT_PATTERN.split(line):
                fragment = self.LABEL_PREFIX_PATTERN.sub("", fragment.strip()).strip()
                if fragment:
                    fragments.append(fragment)
        return fragments

    def extract_min_experience(self, text: str) -> int | None:
        match = self.MIN_EXPERIENCE_PATTERN.search(text)
        return int(match.group(1)) if match else None

    def extract_role_keywords(self, text: str) -> list[str]:
        """Tokens of the first role noun, or of the first line when none appears."""
        match = self.ROLE_PATTERN.search(text)
        if match:
            return unique(tokenize(match.group(1)))
        lines = split_lines(text)
        return unique(tokenize(lines[0])) if lines else []


def parse_job_description(job_description: str, config: ResolvedATSConfig) -> ParsedJobDescription:
    """Convenience wrapper around :class:`JobExtractor`."""
    return JobExtractor(config).extract(job_description)
