"""Tests for LLM schemas, budget, adapters and prompts."""

import pytest

from ats_checker.exceptions import BudgetExceededError
from ats_checker.llm.adapters import (
    adapt_jd_clarification,
    adapt_section_classification,
    adapt_skill_normalization,
    adapt_suggestion_enhancement,
    safe_extract_array,
    safe_extract_number,
    safe_extract_string,
)
from ats_checker.llm.budget import LLMBudgetManager
from ats_checker.llm.schema import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    is_structured_object_schema,
    parse_schema,
    validate_schema,
)
from ats_checker.llm.schemas import (
    JD_CLARIFICATION_SCHEMA,
    SECTION_CLASSIFICATION_SCHEMA,
    SUGGESTION_ENHANCEMENT_SCHEMA,
)
from ats_checker.models.llm import LLMBudget
from ats_checker.prompts.enhancement import (
    section_classification_user,
    suggestion_enhancement_user,
)


class TestSchemaValidation:
    """Tests for the recursive schema validator."""

    def test_valid_suggestion_payload(self) -> None:
        data = {"suggestions": [{"original": "a", "enhanced": "b", "actionable": True}]}
        assert validate_schema(data, SUGGESTION_ENHANCEMENT_SCHEMA)

    def test_missing_required_key(self) -> None:
        assert not validate_schema({}, SUGGESTION_ENHANCEMENT_SCHEMA)

    def test_wrong_container_type(self) -> None:
        assert not validate_schema({"suggestions": "none"}, SUGGESTION_ENHANCEMENT_SCHEMA)
        assert not validate_schema(["suggestions"], SUGGESTION_ENHANCEMENT_SCHEMA)

    def test_array_items_are_checked(self) -> None:
        data = {"suggestions": [{"original": "a", "enhanced": 3}]}
        assert not validate_schema(data, SUGGESTION_ENHANCEMENT_SCHEMA)

    def test_booleans_are_not_numbers(self) -> None:
        assert validate_schema(3, NumberSchema())
        assert validate_schema(0.5, NumberSchema())
        assert not validate_schema(True, NumberSchema())

    def test_string_enum(self) -> None:
        data = {"sections": [{"header": "Work", "classification": "experience"}]}
        assert validate_schema(data, SECTION_CLASSIFICATION_SCHEMA)
        data["sections"][0]["classification"] = "hobbies"
        assert not validate_schema(data, SECTION_CLASSIFICATION_SCHEMA)

    def test_optional_property_may_be_null(self) -> None:
        schema = ObjectSchema(
            properties={"name": StringSchema(), "note": StringSchema()}, required=["name"]
        )
        assert validate_schema({"name": "x", "note": None}, schema)
        assert not validate_schema({"name": None}, schema)

    def test_undeclared_properties_are_ignored(self) -> None:
        schema = ObjectSchema(properties={"ok": BooleanSchema()}, required=["ok"])
        assert validate_schema({"ok": False, "extra": [1, 2]}, schema)

    def test_untyped_array_accepts_anything(self) -> None:
        assert validate_schema([1, "a", None], ArraySchema())


class TestSchemaNodes:
    def test_structured_object_precondition(self) -> None:
        assert is_structured_object_schema(SUGGESTION_ENHANCEMENT_SCHEMA)
        assert not is_structured_object_schema(ObjectSchema())
        assert not is_structured_object_schema(StringSchema())
        assert not is_structured_object_schema({"type": "object"})

    def test_to_json_schema(self) -> None:
        rendered = SUGGESTION_ENHANCEMENT_SCHEMA.to_json_schema()
        assert rendered["type"] == "object"
        assert rendered["required"] == ["suggestions"]
        items = rendered["properties"]["suggestions"]["items"]
        assert items["properties"]["actionable"] == {
            "type": "boolean",
            "description": "Whether the suggestion is concrete and actionable",
        }

    def test_parse_schema_round_trips_json_schema(self) -> None:
        parsed = parse_schema(JD_CLARIFICATION_SCHEMA.to_json_schema())
        assert parsed == JD_CLARIFICATION_SCHEMA

    def test_parse_schema_rejects_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            parse_schema({"type": "tuple"})


class TestBudgetManager:
    """Tests for call and token limits."""

    def test_fresh_budget_allows_call(self) -> None:
        LLMBudgetManager(LLMBudget()).assert_can_call(2000)

    def test_call_limit(self) -> None:
        budget = LLMBudgetManager(LLMBudget(max_calls=1))
        budget.record_usage(100)
        with pytest.raises(BudgetExceededError, match="call limit exceeded: 1/1"):
            budget.assert_can_call(10)

    def test_per_call_limit(self) -> None:
        budget = LLMBudgetManager(LLMBudget(max_tokens_per_call=500))
        with pytest.raises(BudgetExceededError, match="exceeds per-call limit 500"):
            budget.assert_can_call(501)

    def test_total_limit(self) -> None:
        budget = LLMBudgetManager(LLMBudget(max_total_tokens=3000))
        budget.record_usage(2000)
        with pytest.raises(BudgetExceededError, match="Total token budget exceeded: 3500/3000"):
            budget.assert_can_call(1500)

    def test_stats_and_reset(self) -> None:
        budget = LLMBudgetManager(LLMBudget(max_calls=3, max_total_tokens=5000))
        budget.record_usage(1200)
        stats = budget.stats()
        assert stats.calls_used == 1
        assert stats.calls_remaining == 2
        assert stats.tokens_used == 1200
        assert stats.tokens_remaining == 3800
        budget.reset()
        assert budget.stats().calls_used == 0
        assert not budget.is_exhausted()

    def test_exhausted(self) -> None:
        budget = LLMBudgetManager(LLMBudget(max_calls=1))
        budget.record_usage(1)
        assert budget.is_exhausted()


class TestAdapters:
    """Tests for payload adapters."""

    def test_suggestion_enhancement_skips_incomplete_items(self) -> None:
        data = {
            "suggestions": [
                {"original": "a", "enhanced": "A!", "actionable": True},
                {"original": "b", "enhanced": ""},
                {"original": "c"},
                "not an object",
                {"original": "d", "enhanced": "D!", "actionable": "yes"},
            ]
        }
        adapted = adapt_suggestion_enhancement(data)
        assert [item.enhanced for item in adapted] == ["A!", "D!"]
        assert adapted[0].actionable is True
        assert adapted[1].actionable is None

    def test_malformed_payloads_yield_empty(self) -> None:
        assert adapt_suggestion_enhancement(None) == []
        assert adapt_suggestion_enhancement({"suggestions": "x"}) == []
        assert adapt_skill_normalization([]) == []
        assert adapt_section_classification("sections") == []

    def test_skill_normalization(self) -> None:
        data = {
            "canonicalSkills": [
                {"input": "ReactJS", "normalized": "react", "confidence": 0.9},
                {"input": "k8s", "normalized": "kubernetes", "confidence": "high"},
            ]
        }
        adapted = adapt_skill_normalization(data)
        assert [(s.input, s.normalized, s.confidence) for s in adapted] == [
            ("ReactJS", "react", 0.9),
            ("k8s", "kubernetes", None),
        ]

    def test_section_classification(self) -> None:
        data = {"sections": [{"header": "Where I worked", "classification": "experience"}]}
        adapted = adapt_section_classification(data)
        assert adapted[0].classification == "experience"

    def test_jd_clarification(self) -> None:
        data = {
            "implicitSkills": ["git", 3, "ci/cd"],
            "implicitExperience": {"minYears": 4, "domains": ["fintech"]},
            "clarityScore": 0.7,
        }
        adapted = adapt_jd_clarification(data)
        assert adapted.implicit_skills == ["git", "ci/cd"]
        assert adapted.implicit_experience is not None
        assert adapted.implicit_experience.min_years == 4
        assert adapted.implicit_experience.domains == ["fintech"]
        assert adapted.clarity_score == 0.7

    def test_jd_clarification_without_experience(self) -> None:
        adapted = adapt_jd_clarification({"implicitSkills": [], "implicitExperience": {}})
        assert adapted.implicit_experience is None
        assert adapted.clarity_score is None

    def test_safe_extract(self) -> None:
        obj = {"s": "text", "n": 2, "b": True, "a": [1]}
        assert safe_extract_string(obj, "s") == "text"
        assert safe_extract_string(obj, "n") is None
        assert safe_extract_number(obj, "n") == 2
        assert safe_extract_number(obj, "b") is None
        assert safe_extract_array(obj, "a") == [1]
        assert safe_extract_array("not a dict", "a") == []


class TestPrompts:
    def test_suggestions_are_bulleted(self) -> None:
        prompt = suggestion_enhancement_user(["Add metrics", "Use verbs"])
        assert "- Add metrics\n- Use verbs" in prompt

    def test_headers_are_quoted(self) -> None:
        assert '- "Where I worked"' in section_classification_user(["Where I worked"])
