"""
Configuration: preset policies and user settings.
"""

from .presets import PRESET_REGISTRY, Preset, get_preset_policy, list_presets
from .settings import CONFIG_ENV_VAR, PassforgeSettings, load_settings

__all__ = [
    # Presets
    "Preset",
    "PRESET_REGISTRY",
    "get_preset_policy",
    "list_presets",
    # Settings
    "PassforgeSettings",
    "load_settings",
    "CONFIG_ENV_VAR",
]
