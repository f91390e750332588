"""
Data models for secret generation.

A GenerationPolicy is an immutable description of the desired secret; it is
validated on construction so generators never see an impossible request.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Optional, Union

from .charset import CharacterClass, classes_for
from .errors import EmptyAlphabetError, PolicyUnsatisfiableError, WordListTooSmallError
from .wordlist import WordList

if TYPE_CHECKING:
    from .config.presets import Preset


DEFAULT_LENGTH = 18
DEFAULT_WORD_COUNT = 4
DEFAULT_SEPARATOR = "-"


class SecretKind(Enum):
    """Which generator variant a policy targets."""
    PASSWORD = "password"
    PASSPHRASE = "passphrase"


@dataclass(frozen=True)
class GenerationPolicy:
    """
    Declarative shape of a secret.

    Password fields: length, max_length (ranged length when set) and the
    four include flags. Passphrase fields: word_count, separator, word_list
    (None selects the embedded default list) and the decoration rules
    capitalize / include_number.
    """
    kind: SecretKind = SecretKind.PASSWORD
    length: int = DEFAULT_LENGTH
    max_length: Optional[int] = None
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_digits: bool = True
    include_symbols: bool = True
    word_count: int = DEFAULT_WORD_COUNT
    separator: str = DEFAULT_SEPARATOR
    word_list: Optional[WordList] = field(default=None, compare=False, repr=False)
    capitalize: bool = False
    include_number: bool = False

    def __post_init__(self):
        if self.kind is SecretKind.PASSWORD:
            self._validate_password()
        else:
            self._validate_passphrase()

    def _validate_password(self) -> None:
        classes = self.enabled_classes
        if not classes:
            raise EmptyAlphabetError("At least one character class must be enabled")
        if self.length < 1:
            raise PolicyUnsatisfiableError(
                f"Length of password cannot be less than 1 (got {self.length})"
            )
        if self.length < len(classes):
            raise PolicyUnsatisfiableError(
                f"Length {self.length} cannot hold one character from each of "
                f"{len(classes)} enabled classes"
            )
        if self.max_length is not None and self.max_length < self.length:
            raise PolicyUnsatisfiableError(
                f"Maximum length ({self.max_length}) must be greater than or "
                f"equal to minimum length ({self.length})"
            )

    def _validate_passphrase(self) -> None:
        if self.word_count < 1:
            raise PolicyUnsatisfiableError(
                f"Amount of words cannot be smaller than 1 (got {self.word_count})"
            )
        if self.word_list is not None and len(self.word_list) == 0:
            raise WordListTooSmallError("Word list is empty")

    @property
    def enabled_classes(self) -> FrozenSet[CharacterClass]:
        return classes_for(
            lowercase=self.include_lowercase,
            uppercase=self.include_uppercase,
            digits=self.include_digits,
            symbols=self.include_symbols,
        )

    @property
    def is_ranged(self) -> bool:
        return self.max_length is not None and self.max_length > self.length

    @classmethod
    def password(cls, length: int = DEFAULT_LENGTH, **kwargs) -> "GenerationPolicy":
        """Build a password policy."""
        return cls(kind=SecretKind.PASSWORD, length=length, **kwargs)

    @classmethod
    def passphrase(
        cls,
        word_count: int = DEFAULT_WORD_COUNT,
        separator: str = DEFAULT_SEPARATOR,
        word_list: Optional[WordList] = None,
        **kwargs,
    ) -> "GenerationPolicy":
        """Build a passphrase policy."""
        return cls(
            kind=SecretKind.PASSPHRASE,
            word_count=word_count,
            separator=separator,
            word_list=word_list,
            **kwargs,
        )

    @classmethod
    def from_preset(cls, preset: Union[str, "Preset"], kind: SecretKind) -> "GenerationPolicy":
        """Look up a named preset policy."""
        from .config.presets import get_preset_policy

        return get_preset_policy(preset, kind)

    def with_word_list(self, word_list: WordList) -> "GenerationPolicy":
        """Return a copy bound to ``word_list``."""
        return replace(self, word_list=word_list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting fields irrelevant to the kind."""
        if self.kind is SecretKind.PASSWORD:
            return {
                "kind": self.kind.value,
                "length": self.length,
                "max_length": self.max_length,
                "include_lowercase": self.include_lowercase,
                "include_uppercase": self.include_uppercase,
                "include_digits": self.include_digits,
                "include_symbols": self.include_symbols,
            }
        return {
            "kind": self.kind.value,
            "word_count": self.word_count,
            "separator": self.separator,
            "word_list": self.word_list.source if self.word_list else None,
            "capitalize": self.capitalize,
            "include_number": self.include_number,
        }


@dataclass(frozen=True)
class GeneratedSecret:
    """A produced secret and the variant that created it."""
    value: str
    kind: SecretKind
    entropy_bits: float = 0.0

    @property
    def length(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value
