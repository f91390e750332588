"""
Passphrase generation from a word list.

Words are drawn independently and uniformly with replacement, so repeats
are possible. Entropy is word_count * log2(list size) and the size of the
list is the parameter that matters.
"""

import logging
import math
from typing import List, Optional

from ..errors import WordListTooSmallError
from ..models import GeneratedSecret, GenerationPolicy, SecretKind
from ..random_source import RandomSource
from ..wordlist import MIN_RECOMMENDED_WORDS, WordList
from .base import BaseGenerator

logger = logging.getLogger(__name__)


class PassphraseGenerator(BaseGenerator):
    """Generates separator-joined passphrases."""

    kind = SecretKind.PASSPHRASE

    def prepare(self, policy: GenerationPolicy) -> GenerationPolicy:
        """Bind the word list once per batch and warn about small lists."""
        self._check_policy(policy)
        word_list = self.resolve_word_list(policy)
        if word_list.is_small:
            logger.warning(
                "Word list %s has only %d words (recommended: at least %d); "
                "passphrases drawn from it are weak",
                word_list.source,
                len(word_list),
                MIN_RECOMMENDED_WORDS,
            )
        if policy.word_list is word_list:
            return policy
        return policy.with_word_list(word_list)

    def generate(
        self,
        policy: GenerationPolicy,
        rng: Optional[RandomSource] = None,
    ) -> GeneratedSecret:
        """
        Generate one passphrase.

        Raises:
            WordListTooSmallError: If the word list is empty
        """
        self._check_policy(policy)
        rng = self._resolve_rng(rng)
        word_list = self.resolve_word_list(policy)

        words = [rng.choice(word_list) for _ in range(policy.word_count)]
        words = self._decorate(words, policy, rng)

        return GeneratedSecret(
            value=policy.separator.join(words),
            kind=self.kind,
            entropy_bits=self.entropy_bits(policy, word_list),
        )

    @staticmethod
    def resolve_word_list(policy: GenerationPolicy) -> WordList:
        """The policy's list, or the embedded default."""
        word_list = policy.word_list if policy.word_list is not None else WordList.default()
        if len(word_list) == 0:
            raise WordListTooSmallError("Word list is empty")
        return word_list

    @staticmethod
    def entropy_bits(policy: GenerationPolicy, word_list: WordList) -> float:
        bits = word_list.entropy_bits(policy.word_count)
        if policy.include_number:
            # digit value plus the word it is attached to
            bits += math.log2(10) + math.log2(policy.word_count)
        return bits

    def _decorate(self, words: List[str], policy: GenerationPolicy, rng: RandomSource) -> List[str]:
        """Apply the optional capitalization and number rules."""
        if policy.capitalize:
            words = [word[:1].upper() + word[1:] for word in words]
        if policy.include_number:
            position = rng.randbelow(len(words))
            words[position] = f"{words[position]}{rng.randbelow(10)}"
        return words
