"""Tests for the suggestion engine."""

from ats_checker.models.job_spec import ParsedJobDescription
from ats_checker.models.result import ATSBreakdown
from ats_checker.models.resume import ParsedResume
from ats_checker.processors import SuggestionEngine, format_list
from ats_checker.scoring.models import ScoreComputation

FULL_BREAKDOWN = ATSBreakdown(skills=100, experience=100, keywords=100, education=100)
JOB = ParsedJobDescription(raw="", normalized_text="")


def make_resume(verbs: tuple[str, ...] = ("led", "built", "delivered"), **kwargs) -> ParsedResume:
    return ParsedResume(raw="", normalized_text="", action_verbs=verbs, **kwargs)


class TestFormatList:
    def test_dedupes(self) -> None:
        assert format_list(["a", "b", "a"]) == "a, b"

    def test_truncates_with_ellipsis(self) -> None:
        values = [f"skill{i}" for i in range(8)]
        assert format_list(values) == "skill0, skill1, skill2, skill3, skill4, skill5..."


class TestSuggestionEngine:
    """Tests for gap-to-text mapping."""

    def test_no_gaps_no_suggestions(self) -> None:
        score = ScoreComputation(score=100, breakdown=FULL_BREAKDOWN)
        result = SuggestionEngine().generate(make_resume(), JOB, score, [])
        assert result.suggestions == []
        assert result.warnings == []

    def test_templates_in_order(self) -> None:
        score = ScoreComputation(
            score=40,
            breakdown=FULL_BREAKDOWN,
            missing_skills=["graphql"],
            missing_keywords=["kafka", "spark"],
            overused_keywords=["react"],
            required_experience_years=5,
            missing_experience_years=2.5,
            unmet_education=["master"],
        )
        result = SuggestionEngine().generate(make_resume(verbs=("led",)), JOB, score, [])
        assert result.suggestions == [
            "Highlight these required skills: graphql",
            "Incorporate job-specific keywords: kafka, spark",
            "Avoid keyword stuffing for: react",
            "Clarify at least 5 years of relevant experience with quantified achievements.",
            "State your education credentials matching: master",
            "Strengthen bullet points with impact verbs (led, built, improved, delivered).",
        ]

    def test_three_action_verbs_is_enough(self) -> None:
        score = ScoreComputation(score=100, breakdown=FULL_BREAKDOWN)
        result = SuggestionEngine().generate(make_resume(), JOB, score, [])
        assert not any("impact verbs" in s for s in result.suggestions)

    def test_warnings_forward_rules_then_parser(self) -> None:
        score = ScoreComputation(score=100, breakdown=FULL_BREAKDOWN)
        resume = make_resume(warnings=("skills section not detected",))
        result = SuggestionEngine().generate(
            resume, JOB, score, ["skills section missing (penalty 8)"]
        )
        assert result.warnings == [
            "skills section missing (penalty 8)",
            "skills section not detected",
        ]

    def test_deterministic(self) -> None:
        score = ScoreComputation(
            score=50, breakdown=FULL_BREAKDOWN, missing_keywords=["b", "a", "c"]
        )
        engine = SuggestionEngine()
        first = engine.generate(make_resume(), JOB, score, ["w"])
        second = engine.generate(make_resume(), JOB, score, ["w"])
        assert first == second
