"""Date-range parsing for experience duration."""

import re
from datetime import date

from ats_checker.models.resume import DateRange

# Pattern to match 4-digit years (1900-2099)
YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b")

# Terms indicating current/ongoing employment
PRESENT_TERMS = {"present", "current", "now", "ongoing"}

MONTHS = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

_DATE_TOKEN = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+\d{4}|\d{4}"
RANGE_PATTERN = re.compile(
    rf"({_DATE_TOKEN})\s*(?:-|–|—|to)\s*(Present|Current|Now|Ongoing|{_DATE_TOKEN})",
    re.IGNORECASE,
)
MONTH_YEAR_PATTERN = re.compile(r"([a-z]{3,9})\.?\s*(\d{4})")


def parse_date_token(raw: str) -> tuple[int, int | None] | None:
    """Parse "Jan 2020" or "2020" into ``(year, month)``.

    The month is None when only a year is given or the month name is unknown.
    """
    cleaned = raw.strip().lower()
    match = MONTH_YEAR_PATTERN.search(cleaned)
    if match:
        return int(match.group(2)), MONTHS.get(match.group(1))
    match = YEAR_PATTERN.search(cleaned)
    if match:
        return int(match.group()), None
    return None


def months_between(start: tuple[int, int | None], end: tuple[int, int | None]) -> int:
    """Inclusive month count; a bare start year means January, a bare end year December."""
    start_year, start_month = start
    end_year, end_month = end
    return (end_year - start_year) * 12 + ((end_month or 12) - (start_month or 1) + 1)


def parse_date_range(text: str, today: date | None = None) -> DateRange | None:
    """Find a date span such as "Jan 2020 - Present" in free text.

    Args:
        text: A line that may contain a date range.
        today: Reference date used to close ongoing ranges (defaults to today).

    Returns:
        The parsed range, or None if the text contains no recognizable span.

    Examples:
        >>> parse_date_range("2019 - 2020").duration_in_months
        24
        >>> parse_date_range("Senior Engineer") is None
        True
    """
    normalized = text.strip()
    match = RANGE_PATTERN.search(normalized)
    if not match:
        return None

    start = parse_date_token(match.group(1))
    if start is None:
        return None

    end_raw = match.group(2)
    is_present = end_raw.lower() in PRESENT_TERMS
    end = None if is_present else parse_date_token(end_raw)
    if end is None:
        today = today or date.today()
        end = (today.year, today.month)

    duration = months_between(start, end)
    return DateRange(
        raw=normalized,
        start=match.group(1),
        end="present" if is_present else end_raw,
        duration_in_months=duration if duration > 0 else None,
    )


def sum_experience_years(ranges: list[DateRange]) -> float:
    """Total years across ranges, rounded to 2 decimals.

    Overlapping ranges (concurrent roles) are summed as-is.
    """
    months = sum(r.duration_in_months or 0 for r in ranges)
    return round(months / 12, 2)
