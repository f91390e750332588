"""
User settings: defaults read from a YAML file.

The file is named by ``--config`` or by the PASSFORGE_CONFIG environment
variable (a ``.env`` file in the working directory is honoured). Command
line flags override file values, which override built-in defaults.

Example file::

    length: 24
    words: 6
    separator: "_"
    word_list: ~/lists/eff_large_wordlist.txt
    evaluate_strength: true
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import InvalidConfigError
from ..models import DEFAULT_LENGTH, DEFAULT_SEPARATOR, DEFAULT_WORD_COUNT

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PASSFORGE_CONFIG"


class PassforgeSettings(BaseModel):
    """Defaults applied when the corresponding flag is not given."""
    model_config = ConfigDict(extra="forbid")

    length: int = Field(default=DEFAULT_LENGTH, ge=1)
    max_length: Optional[int] = Field(default=None, ge=1)
    words: int = Field(default=DEFAULT_WORD_COUNT, ge=1)
    separator: str = DEFAULT_SEPARATOR
    word_list: Optional[Path] = None
    count: int = Field(default=1, ge=1)
    evaluate_strength: bool = False
    workers: int = Field(default=1, ge=1)
    preset: Optional[str] = None
    passphrase: bool = False


def load_settings(path: Optional[Union[str, Path]] = None) -> PassforgeSettings:
    """
    Load settings from ``path``, or from PASSFORGE_CONFIG when ``path`` is None.

    Returns built-in defaults when no file is configured.

    Raises:
        InvalidConfigError: If the file cannot be read, parsed or validated
    """
    if path is None:
        load_dotenv(find_dotenv(usecwd=True))
        path = os.getenv(CONFIG_ENV_VAR) or None
    if path is None:
        return PassforgeSettings()

    path = Path(path).expanduser()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise InvalidConfigError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"Invalid YAML in settings file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfigError(f"Settings file {path} must contain a mapping")

    try:
        settings = PassforgeSettings.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid settings in {path}: {e}") from e

    if settings.word_list is not None:
        settings = settings.model_copy(update={"word_list": settings.word_list.expanduser()})
    logger.debug("Loaded settings from %s", path)
    return settings
