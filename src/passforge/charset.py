"""
Character classes and alphabet composition for password generation.

Each class maps to a fixed ASCII symbol set. Alphabets are composed in the
canonical order lowercase, uppercase, digit, symbol so that the same enabled
set always yields the same alphabet.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple

from .errors import EmptyAlphabetError


LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
# No quotes, backtick, backslash, slash, tilde or whitespace
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"


class CharacterClass(Enum):
    """Symbol classes a password may draw from."""
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def characters(self) -> str:
        return _CLASS_CHARACTERS[self]

    @property
    def order(self) -> int:
        return CANONICAL_ORDER.index(self)


_CLASS_CHARACTERS = {
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.DIGIT: DIGITS,
    CharacterClass.SYMBOL: SYMBOLS,
}

CANONICAL_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)

_CHAR_TO_CLASS = {
    char: cls for cls in CANONICAL_ORDER for char in cls.characters
}


@dataclass(frozen=True)
class Alphabet:
    """
    Deduplicated union of the characters of the enabled classes.

    Behaves as a read-only sequence of single characters.
    """
    characters: str
    classes: Tuple[CharacterClass, ...]

    @property
    def size(self) -> int:
        return len(self.characters)

    @property
    def bits_per_symbol(self) -> float:
        """Entropy contributed by one uniform draw from this alphabet."""
        return math.log2(self.size)

    def __len__(self) -> int:
        return len(self.characters)

    def __getitem__(self, index: int) -> str:
        return self.characters[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.characters)

    def __contains__(self, char: object) -> bool:
        return char in self.characters


def classes_for(
    lowercase: bool = True,
    uppercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> FrozenSet[CharacterClass]:
    """Map the policy include-flags to the enabled class set."""
    flags = {
        CharacterClass.LOWERCASE: lowercase,
        CharacterClass.UPPERCASE: uppercase,
        CharacterClass.DIGIT: digits,
        CharacterClass.SYMBOL: symbols,
    }
    return frozenset(cls for cls, enabled in flags.items() if enabled)


def build_alphabet(classes: Iterable[CharacterClass]) -> Alphabet:
    """
    Compose the sampling alphabet for a set of enabled classes.

    Args:
        classes: Enabled character classes (any iterable, duplicates ignored)

    Returns:
        Alphabet in canonical class order

    Raises:
        EmptyAlphabetError: If no class is enabled
    """
    enabled = set(classes)
    if not enabled:
        raise EmptyAlphabetError("At least one character class must be enabled")

    ordered = tuple(cls for cls in CANONICAL_ORDER if cls in enabled)
    seen = set()
    chars = []
    for cls in ordered:
        for char in cls.characters:
            if char not in seen:
                seen.add(char)
                chars.append(char)

    return Alphabet(characters="".join(chars), classes=ordered)


def classify(char: str) -> Optional[CharacterClass]:
    """Return the class a character belongs to, or None if it is in none."""
    return _CHAR_TO_CLASS.get(char)


def missing_classes(text: Iterable[str], classes: Iterable[CharacterClass]) -> Tuple[CharacterClass, ...]:
    """Return the enabled classes (canonical order) not represented in ``text``."""
    enabled = set(classes)
    present = {classify(char) for char in text}
    return tuple(cls for cls in CANONICAL_ORDER if cls in enabled and cls not in present)
