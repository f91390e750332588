"""
Password generation with generate-then-repair class coverage.

All characters are first drawn uniformly from the full alphabet. Enabled
classes that did not appear are then patched in one at a time by
overwriting a uniformly chosen position, re-checking after every patch.
This keeps the character distribution close to uniform, unlike reserving
one slot per required class.
"""

import logging
from typing import List, Optional

from ..charset import Alphabet, build_alphabet, missing_classes
from ..errors import PolicyUnsatisfiableError, RngExhaustedError
from ..models import GeneratedSecret, GenerationPolicy, SecretKind
from ..random_source import RandomSource
from .base import BaseGenerator

logger = logging.getLogger(__name__)

# Hard cap on repair iterations; only a broken random source gets near it
MAX_REPAIR_ATTEMPTS = 1000


class PasswordGenerator(BaseGenerator):
    """Generates passwords from character-class policies."""

    kind = SecretKind.PASSWORD

    def __init__(self, max_repair_attempts: int = MAX_REPAIR_ATTEMPTS):
        self.max_repair_attempts = max_repair_attempts

    def generate(
        self,
        policy: GenerationPolicy,
        rng: Optional[RandomSource] = None,
    ) -> GeneratedSecret:
        """
        Generate one password.

        Raises:
            EmptyAlphabetError: If no class is enabled
            PolicyUnsatisfiableError: If the length cannot hold every enabled class
            RngExhaustedError: If class coverage cannot be reached within the cap
        """
        self._check_policy(policy)
        rng = self._resolve_rng(rng)

        alphabet = build_alphabet(policy.enabled_classes)
        length = self.resolve_length(policy, rng)
        if length < len(alphabet.classes):
            raise PolicyUnsatisfiableError(
                f"Length {length} cannot hold one character from each of "
                f"{len(alphabet.classes)} enabled classes"
            )

        chars = [rng.choice(alphabet) for _ in range(length)]
        self._repair(chars, alphabet, rng)

        return GeneratedSecret(
            value="".join(chars),
            kind=self.kind,
            entropy_bits=length * alphabet.bits_per_symbol,
        )

    @staticmethod
    def resolve_length(policy: GenerationPolicy, rng: RandomSource) -> int:
        """Exact length, or a uniform draw from [length, max_length] when ranged."""
        if policy.is_ranged:
            return rng.randint(policy.length, policy.max_length)
        return policy.length

    def _repair(self, chars: List[str], alphabet: Alphabet, rng: RandomSource) -> None:
        """Patch missing classes into ``chars`` in place."""
        for attempt in range(self.max_repair_attempts + 1):
            missing = missing_classes(chars, alphabet.classes)
            if not missing:
                if attempt:
                    logger.debug("Class coverage reached after %d repairs", attempt)
                return
            if attempt == self.max_repair_attempts:
                break
            cls = missing[0]
            position = rng.randbelow(len(chars))
            chars[position] = rng.choice(cls.characters)

        raise RngExhaustedError(
            f"Could not cover all character classes after "
            f"{self.max_repair_attempts} repair attempts; the random source "
            f"appears to be defective"
        )
