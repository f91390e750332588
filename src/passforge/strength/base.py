"""
Strength evaluation interface and the normalized report it produces.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Tuple


# Score an input needs to "pass"; 3 = safely unguessable
MIN_PASS_SCORE = 3


class ScoreTier(IntEnum):
    """Guessability tier, weakest to strongest."""
    TOO_GUESSABLE = 0       # < 10^3 guesses
    VERY_GUESSABLE = 1      # < 10^6 guesses
    SOMEWHAT_GUESSABLE = 2  # < 10^8 guesses
    SAFELY_UNGUESSABLE = 3  # < 10^10 guesses
    VERY_UNGUESSABLE = 4    # >= 10^10 guesses

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True)
class CrackTimes:
    """Estimated time to crack under the four standard attack scenarios."""
    online_throttled_seconds: float
    online_unthrottled_seconds: float
    offline_slow_hash_seconds: float
    offline_fast_hash_seconds: float

    online_throttled_display: str = ""
    online_unthrottled_display: str = ""
    offline_slow_hash_display: str = ""
    offline_fast_hash_display: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "online_throttled": {
                "seconds": self.online_throttled_seconds,
                "display": self.online_throttled_display,
            },
            "online_unthrottled": {
                "seconds": self.online_unthrottled_seconds,
                "display": self.online_unthrottled_display,
            },
            "offline_slow_hash": {
                "seconds": self.offline_slow_hash_seconds,
                "display": self.offline_slow_hash_display,
            },
            "offline_fast_hash": {
                "seconds": self.offline_fast_hash_seconds,
                "display": self.offline_fast_hash_display,
            },
        }


@dataclass(frozen=True)
class StrengthReport:
    """
    Normalized strength estimate for one secret.

    Derived fresh for every evaluation; never cached or mutated.
    """
    score: int
    guesses: float
    guesses_log10: float
    crack_times: CrackTimes
    warning: str = ""
    suggestions: Tuple[str, ...] = field(default_factory=tuple)
    # Set when only a prefix of the secret was scored
    truncated: bool = False

    @property
    def tier(self) -> ScoreTier:
        return ScoreTier(self.score)

    def passes(self, min_score: int = MIN_PASS_SCORE) -> bool:
        return self.score >= min_score

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "tier": self.tier.label,
            "guesses": self.guesses,
            "guesses_log10": self.guesses_log10,
            "crack_times": self.crack_times.to_dict(),
            "warning": self.warning,
            "suggestions": list(self.suggestions),
            "truncated": self.truncated,
        }


class StrengthEvaluator(ABC):
    """
    Abstract base class for strength evaluators.

    Implementations must be pure: the same input always yields an equal
    report and no state is kept between calls. Any non-empty string must be
    accepted; the empty string yields the weakest report.
    """

    name: str = "base"

    @abstractmethod
    def evaluate(self, secret: str) -> StrengthReport:
        """Score ``secret``."""
        pass

    def passes_threshold(self, secret: str, min_score: int = MIN_PASS_SCORE) -> bool:
        """Whether ``secret`` reaches ``min_score``."""
        return self.evaluate(secret).passes(min_score)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
