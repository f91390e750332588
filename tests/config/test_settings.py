"""
Unit tests for settings loading.
"""

from pathlib import Path

import pytest

from passforge.config import CONFIG_ENV_VAR, PassforgeSettings, load_settings
from passforge.errors import InvalidConfigError


def _write(tmp_path, text):
    path = tmp_path / "passforge.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadSettings:

    def test_defaults_without_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert load_settings() == PassforgeSettings()

    def test_explicit_path(self, tmp_path):
        path = _write(tmp_path, "length: 24\nwords: 6\nseparator: _\nevaluate_strength: true\n")
        settings = load_settings(path)
        assert settings.length == 24
        assert settings.words == 6
        assert settings.separator == "_"
        assert settings.evaluate_strength is True
        assert settings.count == 1

    def test_env_var(self, monkeypatch, tmp_path):
        path = _write(tmp_path, "count: 3\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_settings().count == 3

    def test_dotenv_in_working_directory(self, monkeypatch, tmp_path):
        path = _write(tmp_path, "workers: 2\n")
        (tmp_path / ".env").write_text(f"{CONFIG_ENV_VAR}={path}\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        # load_dotenv sets os.environ; monkeypatch restores it on teardown
        monkeypatch.setenv(CONFIG_ENV_VAR, "")
        monkeypatch.delenv(CONFIG_ENV_VAR)
        assert load_settings().workers == 2

    def test_empty_file(self, tmp_path):
        assert load_settings(_write(tmp_path, "")) == PassforgeSettings()

    def test_word_list_expanded(self, tmp_path):
        settings = load_settings(_write(tmp_path, "word_list: ~/words.txt\n"))
        assert settings.word_list == Path("~/words.txt").expanduser()

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidConfigError, match="Cannot read"):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(InvalidConfigError, match="Invalid YAML"):
            load_settings(_write(tmp_path, "length: [1, 2\n"))

    def test_not_a_mapping(self, tmp_path):
        with pytest.raises(InvalidConfigError, match="mapping"):
            load_settings(_write(tmp_path, "- 1\n- 2\n"))

    def test_unknown_key(self, tmp_path):
        with pytest.raises(InvalidConfigError):
            load_settings(_write(tmp_path, "colour: blue\n"))

    def test_out_of_range_value(self, tmp_path):
        with pytest.raises(InvalidConfigError):
            load_settings(_write(tmp_path, "length: 0\n"))
