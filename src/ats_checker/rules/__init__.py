"""Rule engine for score penalties."""

from ats_checker.rules.engine import RuleEngine, RuleEvaluation

__all__ = ["RuleEngine", "RuleEvaluation"]
