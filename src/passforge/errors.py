"""
Exception hierarchy for secret generation.

Every failure raised by the library derives from PassforgeError so callers
(the CLI in particular) can tell generation failures apart from programming
errors.
"""


class PassforgeError(Exception):
    """Base exception for generation and evaluation failures."""
    pass


class EmptyAlphabetError(PassforgeError):
    """Raised when no character class is enabled."""
    pass


class PolicyUnsatisfiableError(PassforgeError):
    """Raised when a policy cannot be met (e.g. length too short for class coverage)."""
    pass


class WordListTooSmallError(PassforgeError):
    """Raised when a word list is empty."""
    pass


class WordListLoadError(PassforgeError):
    """Raised when a word list file cannot be read or decoded."""
    pass


class RngExhaustedError(PassforgeError):
    """Raised when the bounded class-repair loop runs out of attempts."""
    pass


class InvalidConfigError(PassforgeError):
    """Raised for invalid presets, settings files or batch parameters."""
    pass
