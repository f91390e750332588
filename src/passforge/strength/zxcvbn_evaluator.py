"""
Strength evaluator backed by the zxcvbn pattern-matching estimator.

zxcvbn scores a string by the cheapest way to guess it from dictionary
words, keyboard walks, dates, repeats and sequences. This adapter maps its
result dict onto StrengthReport.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, Tuple

from zxcvbn import zxcvbn

from .base import CrackTimes, ScoreTier, StrengthEvaluator, StrengthReport

logger = logging.getLogger(__name__)

# Input length limit of the zxcvbn library; longer inputs are scored on this prefix
MAX_EVALUATED_LENGTH = 72

_SCENARIOS = {
    "online_throttled": "online_throttling_100_per_hour",
    "online_unthrottled": "online_no_throttling_10_per_second",
    "offline_slow_hash": "offline_slow_hashing_1e4_per_second",
    "offline_fast_hash": "offline_fast_hashing_1e10_per_second",
}


def empty_report() -> StrengthReport:
    """Weakest possible report, used for the empty string."""
    return StrengthReport(
        score=int(ScoreTier.TOO_GUESSABLE),
        guesses=1.0,
        guesses_log10=0.0,
        crack_times=CrackTimes(
            online_throttled_seconds=0.0,
            online_unthrottled_seconds=0.0,
            offline_slow_hash_seconds=0.0,
            offline_fast_hash_seconds=0.0,
            online_throttled_display="instant",
            online_unthrottled_display="instant",
            offline_slow_hash_display="instant",
            offline_fast_hash_display="instant",
        ),
        warning="Secret is empty",
        suggestions=("Use a non-empty secret",),
    )


class ZxcvbnEvaluator(StrengthEvaluator):
    """Adapts zxcvbn results to StrengthReport."""

    name = "zxcvbn"

    def __init__(self, user_inputs: Iterable[str] = ()):
        """
        Args:
            user_inputs: Strings to penalize if they appear in a secret
                (user names, site names, ...)
        """
        self.user_inputs: Tuple[str, ...] = tuple(user_inputs)

    def evaluate(self, secret: str) -> StrengthReport:
        if not secret:
            return empty_report()
        truncated = len(secret) > MAX_EVALUATED_LENGTH
        if truncated:
            logger.info(
                "Secret has %d characters; strength is estimated from the first %d",
                len(secret),
                MAX_EVALUATED_LENGTH,
            )
            secret = secret[:MAX_EVALUATED_LENGTH]

        result = zxcvbn(secret, user_inputs=list(self.user_inputs))
        report = self._to_report(result)
        return replace(report, truncated=True) if truncated else report

    @staticmethod
    def _to_report(result: Dict[str, Any]) -> StrengthReport:
        seconds = result["crack_times_seconds"]
        display = result["crack_times_display"]
        crack_times = CrackTimes(
            **{f"{name}_seconds": float(seconds[key]) for name, key in _SCENARIOS.items()},
            **{f"{name}_display": str(display[key]) for name, key in _SCENARIOS.items()},
        )
        feedback = result.get("feedback") or {}
        return StrengthReport(
            score=int(result["score"]),
            guesses=float(result["guesses"]),
            guesses_log10=float(result["guesses_log10"]),
            crack_times=crack_times,
            warning=feedback.get("warning") or "",
            suggestions=tuple(feedback.get("suggestions") or ()),
        )
