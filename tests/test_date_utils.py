"""Tests for date parsing utilities."""

from datetime import date

import pytest

from ats_checker.models.resume import DateRange
from ats_checker.utils.date_utils import (
    PRESENT_TERMS,
    YEAR_PATTERN,
    months_between,
    parse_date_range,
    parse_date_token,
    sum_experience_years,
)

TODAY = date(2025, 1, 15)


class TestYearPattern:
    """Tests for the YEAR_PATTERN regex."""

    def test_matches_four_digit_years(self) -> None:
        assert YEAR_PATTERN.search("2021") is not None
        assert YEAR_PATTERN.search("1999") is not None

    def test_does_not_match_invalid_years(self) -> None:
        assert YEAR_PATTERN.search("999") is None
        assert YEAR_PATTERN.search("22021") is None


class TestPresentTerms:
    def test_contains_expected_terms(self) -> None:
        assert {"present", "current", "now", "ongoing"} <= PRESENT_TERMS


class TestParseDateToken:
    """Tests for parse_date_token."""

    def test_bare_year(self) -> None:
        assert parse_date_token("2020") == (2020, None)

    def test_short_month(self) -> None:
        assert parse_date_token("Jan 2020") == (2020, 1)

    def test_full_month(self) -> None:
        assert parse_date_token("September 2019") == (2019, 9)

    def test_abbreviation_with_period(self) -> None:
        assert parse_date_token("Sept. 2019") == (2019, 9)

    def test_garbage_returns_none(self) -> None:
        assert parse_date_token("soon") is None


class TestMonthsBetween:
    def test_inclusive_count(self) -> None:
        assert months_between((2020, 1), (2020, 1)) == 1

    def test_bare_years_span_full_years(self) -> None:
        assert months_between((2019, None), (2020, None)) == 24


class TestParseDateRange:
    """Tests for parse_date_range."""

    def test_year_range(self) -> None:
        result = parse_date_range("2019 - 2020")
        assert result is not None
        assert result.duration_in_months == 24
        assert result.start == "2019"
        assert result.end == "2020"

    def test_month_year_range(self) -> None:
        result = parse_date_range("Jan 2020 - Mar 2021")
        assert result is not None
        assert result.duration_in_months == 15

    def test_to_separator_and_full_month_names(self) -> None:
        result = parse_date_range("June 2018 to December 2020")
        assert result is not None
        assert result.duration_in_months == 31

    def test_en_dash_separator(self) -> None:
        result = parse_date_range("2018 – 2019")
        assert result is not None
        assert result.duration_in_months == 24

    @pytest.mark.parametrize("term", ["Present", "current", "Now", "ONGOING"])
    def test_open_range_uses_reference_date(self, term: str) -> None:
        result = parse_date_range(f"Jan 2020 - {term}", today=TODAY)
        assert result is not None
        assert result.end == "present"
        assert result.duration_in_months == 61

    def test_range_inside_a_title_line(self) -> None:
        result = parse_date_range("Senior Engineer (Jan 2020 - Present)", today=TODAY)
        assert result is not None
        assert result.start == "Jan 2020"

    def test_no_range_returns_none(self) -> None:
        assert parse_date_range("Senior Engineer") is None
        assert parse_date_range("Graduated 2018") is None

    def test_reversed_range_has_no_duration(self) -> None:
        result = parse_date_range("2021 - 2019")
        assert result is not None
        assert result.duration_in_months is None


class TestSumExperienceYears:
    def test_sums_and_rounds(self) -> None:
        ranges = [
            DateRange(raw="a", start="2019", end="2020", duration_in_months=24),
            DateRange(raw="b", start="Jan 2021", end="Jun 2021", duration_in_months=6),
        ]
        assert sum_experience_years(ranges) == 2.5

    def test_missing_durations_count_as_zero(self) -> None:
        ranges = [DateRange(raw="a", start="2021", end="2019", duration_in_months=None)]
        assert sum_experience_years(ranges) == 0.0

    def test_overlapping_ranges_are_double_counted(self) -> None:
        same = DateRange(raw="a", start="2020", end="2020", duration_in_months=12)
        assert sum_experience_years([same, same]) == 2.0

    def test_rounds_to_two_decimals(self) -> None:
        ranges = [DateRange(raw="a", start="Jan 2020", end="May 2020", duration_in_months=5)]
        assert sum_experience_years(ranges) == 0.42
