"""Tests for markdown output."""

from pathlib import Path

from ats_checker.models.result import ATSAnalysisResult, ATSBreakdown
from ats_checker.output import format_analysis_result, save_markdown


def make_result(**kwargs) -> ATSAnalysisResult:
    defaults = {
        "score": 72.5,
        "breakdown": ATSBreakdown(skills=80, experience=75, keywords=50.5, education=100),
        "matched_keywords": ["react", "typescript"],
        "missing_keywords": ["graphql"],
        "suggestions": ["Highlight these required skills: graphql"],
    }
    return ATSAnalysisResult(**{**defaults, **kwargs})


class TestFormatAnalysisResult:
    def test_sections(self) -> None:
        text = format_analysis_result(make_result())
        assert text.startswith("## ATS Analysis (Score: 72.5/100)")
        assert "- **Keywords:** 50.5" in text
        assert "### Matched Keywords\n- react\n- typescript" in text
        assert "- Highlight these required skills: graphql" in text

    def test_empty_lists_are_marked(self) -> None:
        text = format_analysis_result(make_result())
        assert "### Warnings\n- *None*" in text

    def test_overused_only_when_present(self) -> None:
        assert "Overused" not in format_analysis_result(make_result())
        text = format_analysis_result(make_result(overused_keywords=["react"]))
        assert "### Overused Keywords\n- react" in text


class TestSaveMarkdown:
    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        path = save_markdown("# Report", tmp_path / "out" / "report.md")
        assert path.read_text(encoding="utf-8") == "# Report"
