"""
Word list model and loader for passphrase generation.

Accepts plain lists (one word per line) and dice-numbered lists in the EFF
format (``11111<TAB>abacus``), where the second column is the word.
"""

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from .errors import WordListLoadError, WordListTooSmallError

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "wordlist.txt"

# Below this size a list is accepted but callers are warned about entropy
MIN_RECOMMENDED_WORDS = 1024


@dataclass(frozen=True)
class WordList:
    """Ordered, deduplicated, lowercase vocabulary."""
    words: Tuple[str, ...]
    source: str = "<memory>"

    def __post_init__(self):
        if not self.words:
            raise WordListTooSmallError(f"Word list is empty or invalid: {self.source}")

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "<memory>") -> "WordList":
        """Build a list from bare words, lowercasing and dropping duplicates."""
        seen = set()
        ordered = []
        for word in words:
            word = word.strip().lower()
            if word and word not in seen:
                seen.add(word)
                ordered.append(word)
        return cls(words=tuple(ordered), source=source)

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<memory>") -> "WordList":
        """
        Parse word list lines.

        One token per line is the word itself; two tokens means a numbered
        list and the second token is the word. Other lines, and words that
        are not purely alphabetic, are skipped.
        """
        words = []
        skipped = 0
        for line in lines:
            parts = line.split()
            if not parts:
                continue
            word = parts[-1] if len(parts) in (1, 2) else ""
            if word.isalpha():
                words.append(word)
            else:
                skipped += 1
        if skipped:
            logger.debug("Skipped %d malformed lines in %s", skipped, source)
        return cls.from_words(words, source=source)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "WordList":
        """
        Load a word list file.

        Raises:
            WordListLoadError: If the file cannot be read or decoded
            WordListTooSmallError: If no usable words are found
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise WordListLoadError(f"Cannot read word list {path}: {e}") from e
        word_list = cls.from_lines(text.splitlines(), source=str(path))
        logger.debug("Loaded %d words from %s", len(word_list), path)
        return word_list

    @classmethod
    def default(cls) -> "WordList":
        """Return the embedded default list (loaded once per process)."""
        return _load_default()

    def entropy_bits(self, word_count: int) -> float:
        """Entropy of ``word_count`` independent uniform draws from this list."""
        return word_count * math.log2(len(self.words))

    @property
    def is_small(self) -> bool:
        return len(self.words) < MIN_RECOMMENDED_WORDS

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words


@lru_cache(maxsize=1)
def _load_default() -> WordList:
    resource = resources.files("passforge.resources").joinpath(DEFAULT_RESOURCE)
    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListLoadError(f"Cannot read embedded word list: {e}") from e
    return WordList.from_lines(text.splitlines(), source="<default>")
