"""
Unit tests for preset policies.
"""

import pytest

from passforge.config import Preset, get_preset_policy, list_presets
from passforge.errors import InvalidConfigError
from passforge.models import SecretKind


class TestPreset:

    @pytest.mark.parametrize("name", ["weak", "Weak", " WEAK "])
    def test_parse_case_insensitive(self, name):
        assert Preset.parse(name) is Preset.WEAK

    def test_parse_invalid(self):
        with pytest.raises(InvalidConfigError, match="Choices are: Weak, Average, Strong"):
            Preset.parse("extreme")


class TestPresetPolicies:

    def test_password_presets(self):
        weak = get_preset_policy("weak", SecretKind.PASSWORD)
        assert weak.length == 8
        assert not weak.include_symbols
        assert get_preset_policy(Preset.AVERAGE, "password").length == 16
        assert get_preset_policy("strong", SecretKind.PASSWORD).length == 32

    def test_passphrase_presets(self):
        counts = [
            get_preset_policy(preset, SecretKind.PASSPHRASE).word_count
            for preset in Preset
        ]
        assert counts == [4, 8, 16]

    def test_list_presets(self):
        rows = list_presets()
        assert len(rows) == 6
        assert {row["preset"] for row in rows} == {"weak", "average", "strong"}
        assert {row["kind"] for row in rows} == {"password", "passphrase"}
