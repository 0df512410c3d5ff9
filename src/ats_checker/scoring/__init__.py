"""Deterministic ATS scoring.

Every component score is a pure function of the parsed resume, the parsed
job description and the resolved configuration. No LLM is involved.
"""

from ats_checker.scoring.algorithmic import AlgorithmicScorer, calculate_score
from ats_checker.scoring.models import ScoreComputation
from ats_checker.scoring.weights import normalize_weights, resolve_config

__all__ = [
    "AlgorithmicScorer",
    "ScoreComputation",
    "calculate_score",
    "normalize_weights",
    "resolve_config",
]
