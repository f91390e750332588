"""
Secret generators.

Both variants implement BaseGenerator; use get_generator() to pick one by
policy kind.
"""

from typing import Union

from ..errors import InvalidConfigError
from ..models import SecretKind
from .base import BaseGenerator
from .passphrase import PassphraseGenerator
from .password import MAX_REPAIR_ATTEMPTS, PasswordGenerator

GENERATOR_REGISTRY = {
    SecretKind.PASSWORD: PasswordGenerator,
    SecretKind.PASSPHRASE: PassphraseGenerator,
}


def get_generator(kind: Union[SecretKind, str]) -> BaseGenerator:
    """Create the generator for a secret kind."""
    try:
        kind = SecretKind(kind)
    except ValueError:
        available = ", ".join(k.value for k in SecretKind)
        raise InvalidConfigError(f"Unknown generator: {kind}. Available: {available}") from None
    return GENERATOR_REGISTRY[kind]()


__all__ = [
    "BaseGenerator",
    "PasswordGenerator",
    "PassphraseGenerator",
    "GENERATOR_REGISTRY",
    "MAX_REPAIR_ATTEMPTS",
    "get_generator",
]
