"""Configuration loading for STOP matches.

Values come from the MatchConfig defaults, then environment variables
(a local .env file is honoured), then an optional TOML file.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from stop_game.types.match import MatchConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "STOP_"

_ENV_FIELDS = {
    "TURN_SECONDS": "turn_seconds",
    "UNIQUE_LETTERS": "unique_letters",
    "MIN_PLAYERS": "min_players",
    "ALPHABET": "alphabet",
}


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        value = os.getenv(ENV_PREFIX + suffix)
        if value is None or value == "":
            continue
        if field_name == "alphabet":
            overrides[field_name] = tuple(part for part in value.replace(",", " ").split() if part)
        else:
            overrides[field_name] = value
    return overrides


def load_config_from_toml(config_path: str) -> Dict[str, Any]:
    """
    Read the [match] table of a TOML file.

    Args:
        config_path: Path to the TOML configuration file

    Returns:
        Raw values for MatchConfig (unknown keys are dropped with a warning)

    Raises:
        FileNotFoundError: If the config file doesn't exist
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "rb") as f:
        data = tomllib.load(f)

    table = data.get("match", data)
    values: Dict[str, Any] = {}
    for key, value in table.items():
        if key in MatchConfig.model_fields:
            values[key] = value
        else:
            logger.warning(f"Unknown config key '{key}' in {config_path}")
    return values


def load_config(config_path: Optional[str] = None) -> MatchConfig:
    """
    Build the match configuration.

    Args:
        config_path: Optional TOML file whose values win over the environment

    Returns:
        Validated MatchConfig
    """
    load_dotenv()

    values = _env_overrides()
    if config_path is not None:
        values.update(load_config_from_toml(config_path))

    config = MatchConfig(**values)
    logger.debug(f"Loaded match config: {config.model_dump()}")
    return config


def log_level() -> str:
    return os.getenv(ENV_PREFIX + "LOG_LEVEL", "INFO").upper()
