"""Rule-based resume parsing.

Splits raw resume text into sections and extracts skills, titles, action
verbs, education lines and dated experience entries. No LLM involved; the
same text always yields the same ParsedResume.
"""

import logging
import re
from datetime import date
from re import Pattern

from ats_checker.models.config import ResolvedATSConfig
from ats_checker.models.resume import (
    REQUIRED_SECTIONS,
    DateRange,
    ExperienceEntry,
    ParsedResume,
    ResumeSection,
)
from ats_checker.utils.date_utils import parse_date_range, sum_experience_years
from ats_checker.utils.skills import normalize_skills
from ats_checker.utils.text import (
    normalize_for_comparison,
    normalize_whitespace,
    split_lines,
    tokenize,
    unique,
)

logger = logging.getLogger(__name__)

# Recognized impact verbs, in reporting order
ACTION_VERBS = (
    "led",
    "managed",
    "built",
    "designed",
    "implemented",
    "developed",
    "created",
    "improved",
    "optimized",
    "launched",
    "architected",
    "delivered",
    "shipped",
    "collaborated",
    "automated",
    "mentored",
    "modernized",
    "reduced",
    "increased",
)


def _header(aliases: str) -> Pattern[str]:
    # Optional markdown hashes, optional trailing colon
    return re.compile(rf"^(?:#+\s*)?(?:{aliases})\s*:?$", re.IGNORECASE)


class ResumeExtractor:
    """Extract a ParsedResume from raw resume text."""

    SECTION_PATTERNS: dict[ResumeSection, Pattern[str]] = {
        "summary": _header(r"summary|professional\s+summary|profile|about(?:\s+me)?"),
        "experience": _header(
            r"experience|work\s+experience|professional\s+experience|employment|work\s+history"
        ),
        "skills": _header(r"skills|technical\s+skills|technologies"),
        "education": _header(r"education|academics|academic\s+background"),
        "projects": _header(r"projects|portfolio"),
        "certifications": _header(r"certifications|licenses"),
    }

    # Lines opening with a seniority or role word start a new experience entry
    TITLE_PATTERN = re.compile(
        r"^(?:senior|junior|lead|principal|staff|software|full[\s-]*stack|front[\s-]*end"
        r"|back[\s-]*end|engineer|developer|manager|analyst|intern|director|architect)\b",
        re.IGNORECASE,
    )
    COMPANY_SPLIT_PATTERN = re.compile(r"\s+(?:at|@)\s+", re.IGNORECASE)
    TITLE_TERMINATORS = re.compile(r"[,(|]|\s[-–—]\s")

    def __init__(self, config: ResolvedATSConfig, today: date | None = None):
        self.config = config
        self.today = today

    def extract(self, resume_text: str) -> ParsedResume:
        """Parse raw resume text.

        Args:
            resume_text: The resume as plain text or markdown.

        Returns:
            ParsedResume with sections, skills, experience and warnings.
        """
        normalized_text = normalize_whitespace(resume_text)
        sections, detected = self.extract_sections(resume_text)

        skills = self._parse_skills(sections.get("skills"))
        entries, job_titles = self._parse_experience(sections.get("experience"))
        ranges = [entry.dates for entry in entries if entry.dates is not None]

        warnings = [
            f"{section} section not detected"
            for section in REQUIRED_SECTIONS
            if section not in detected
        ]
        tokens = tokenize(normalized_text)
        token_set = set(tokens)

        logger.debug(
            f"Parsed resume: sections={detected}, skills={len(skills)}, entries={len(entries)}"
        )
        return ParsedResume(
            raw=resume_text,
            normalized_text=normalized_text,
            detected_sections=tuple(detected),
            section_content=sections,
            skills=tuple(skills),
            job_titles=tuple(job_titles),
            action_verbs=tuple(verb for verb in ACTION_VERBS if verb in token_set),
            education_entries=tuple(
                normalize_for_comparison(line) for line in split_lines(sections.get("education", ""))
            ),
            experience=tuple(entries),
            total_experience_years=sum_experience_years(ranges),
            keywords=tuple(unique(tokens)),
            warnings=tuple(warnings),
        )

    def detect_section(self, line: str) -> ResumeSection | None:
        """Return the section a header line opens, or None for content lines."""
        for section, pattern in self.SECTION_PATTERNS.items():
            if pattern.match(line.strip()):
                return section
        return None

    def extract_sections(self, text: str) -> tuple[dict[str, str], list[ResumeSection]]:
        """Group lines under the most recent section header.

        Lines before the first header belong to no section. A repeated header
        appends to the earlier content.
        """
        sections: dict[str, str] = {}
        detected: list[ResumeSection] = []
        current: ResumeSection | None = None
        buffer: list[str] = []

        def flush() -> None:
            if current is not None:
                content = "\n".join(buffer).strip()
                previous = sections.get(current)
                sections[current] = f"{previous}\n{content}".strip() if previous else content
            buffer.clear()

        for line in split_lines(text):
            section = self.detect_section(line)
            if section is not None:
                flush()
                current = section
                if section not in detected:
                    detected.append(section)
                continue
            buffer.append(line)
        flush()

        return sections, detected

    def _parse_skills(self, content: str | None) -> list[str]:
        if not content:
            return []
        raw = [skill.strip() for skill in re.split(r"[,;\n]", content)]
        return normalize_skills([skill for skill in raw if skill], self.config.skill_aliases)

    def _split_title(self, text: str) -> tuple[str | None, str | None]:
        """Split "Senior Engineer at Acme (2020 - ...)" into title and company."""
        text = text.strip()
        if not self.TITLE_PATTERN.match(text):
            return None, None
        head = self.TITLE_TERMINATORS.split(text, maxsplit=1)[0].strip()
        parts = self.COMPANY_SPLIT_PATTERN.split(head, maxsplit=1)
        title = parts[0].strip()
        company = parts[1].strip() if len(parts) > 1 and parts[1].strip() else None
        return title or None, company

    def _parse_experience(
        self, content: str | None
    ) -> tuple[list[ExperienceEntry], list[str]]:
        """Assemble experience entries line by line.

        A dated line fills the newest undated entry or starts a new one; a
        title line starts a new entry; anything else extends the description.
        """
        if not content:
            return [], []

        entries: list[ExperienceEntry] = []
        job_titles: list[str] = []

        for line in split_lines(content):
            date_range = parse_date_range(line, today=self.today)
            if date_range is not None:
                if entries and entries[-1].dates is None:
                    entries[-1] = entries[-1].model_copy(update={"dates": date_range})
                else:
                    entries.append(self._dated_entry(line, date_range, job_titles))
                continue

            title, company = self._split_title(line)
            if title is not None:
                job_titles.append(title.lower())
                entries.append(ExperienceEntry(title=title, company=company, description=line))
                continue

            if entries:
                current = entries[-1]
                description = " ".join(part for part in (current.description, line) if part)
                entries[-1] = current.model_copy(update={"description": description.strip()})

        return entries, unique(job_titles)

    def _dated_entry(
        self, line: str, date_range: DateRange, job_titles: list[str]
    ) -> ExperienceEntry:
        prefix = line[: line.find(date_range.start)] if date_range.start in line else ""
        title, company = self._split_title(prefix)
        if title is not None:
            job_titles.append(title.lower())
        return ExperienceEntry(title=title, company=company, dates=date_range)


def parse_resume(
    resume_text: str, config: ResolvedATSConfig, today: date | None = None
) -> ParsedResume:
    """Convenience wrapper around :class:`ResumeExtractor`."""
    return ResumeExtractor(config, today=today).extract(resume_text)
