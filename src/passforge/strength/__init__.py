"""
Strength evaluation.

All evaluators implement StrengthEvaluator and return StrengthReport.
"""

from ..errors import InvalidConfigError
from .base import MIN_PASS_SCORE, CrackTimes, ScoreTier, StrengthEvaluator, StrengthReport
from .zxcvbn_evaluator import MAX_EVALUATED_LENGTH, ZxcvbnEvaluator

EVALUATOR_REGISTRY = {
    ZxcvbnEvaluator.name: ZxcvbnEvaluator,
}


def get_evaluator(name: str = "zxcvbn", **kwargs) -> StrengthEvaluator:
    """Create an evaluator by name."""
    if name not in EVALUATOR_REGISTRY:
        available = ", ".join(sorted(EVALUATOR_REGISTRY))
        raise InvalidConfigError(f"Unknown evaluator: {name}. Available: {available}")
    return EVALUATOR_REGISTRY[name](**kwargs)


__all__ = [
    "StrengthEvaluator",
    "StrengthReport",
    "ScoreTier",
    "CrackTimes",
    "ZxcvbnEvaluator",
    "EVALUATOR_REGISTRY",
    "MIN_PASS_SCORE",
    "MAX_EVALUATED_LENGTH",
    "get_evaluator",
]
