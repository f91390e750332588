"""
Named preset policies.

Presets are a fixed, read-only table keyed by (preset, kind).
"""

from enum import Enum
from typing import Dict, Tuple, Union

from ..errors import InvalidConfigError
from ..models import GenerationPolicy, SecretKind


class Preset(Enum):
    """Preset strength levels."""
    WEAK = "weak"
    AVERAGE = "average"
    STRONG = "strong"

    @classmethod
    def parse(cls, name: Union[str, "Preset"]) -> "Preset":
        """Case-insensitive lookup by name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise InvalidConfigError(
                f"Invalid preset: {name}. Choices are: Weak, Average, Strong"
            ) from None


# Preset registry - policies are frozen so sharing them is safe
PRESET_REGISTRY: Dict[Tuple[Preset, SecretKind], GenerationPolicy] = {
    (Preset.WEAK, SecretKind.PASSWORD): GenerationPolicy.password(
        length=8,
        include_symbols=False,
    ),
    (Preset.AVERAGE, SecretKind.PASSWORD): GenerationPolicy.password(length=16),
    (Preset.STRONG, SecretKind.PASSWORD): GenerationPolicy.password(length=32),
    (Preset.WEAK, SecretKind.PASSPHRASE): GenerationPolicy.passphrase(word_count=4),
    (Preset.AVERAGE, SecretKind.PASSPHRASE): GenerationPolicy.passphrase(word_count=8),
    (Preset.STRONG, SecretKind.PASSPHRASE): GenerationPolicy.passphrase(word_count=16),
}


def get_preset_policy(preset: Union[str, Preset], kind: Union[str, SecretKind]) -> GenerationPolicy:
    """Get the policy for a preset and secret kind."""
    return PRESET_REGISTRY[(Preset.parse(preset), SecretKind(kind))]


def list_presets() -> list:
    """List presets with their policy parameters."""
    return [
        {"preset": preset.value, **policy.to_dict()}
        for (preset, _), policy in PRESET_REGISTRY.items()
    ]
