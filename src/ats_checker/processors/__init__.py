"""Post-scoring processors."""

from ats_checker.processors.suggestions import SuggestionEngine, SuggestionSet, format_list

__all__ = ["SuggestionEngine", "SuggestionSet", "format_list"]
