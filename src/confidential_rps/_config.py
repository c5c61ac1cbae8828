# Area: Shared
"""
confidential_rps._config — Game Configuration
=============================================

Configuration loading and validation for the console host.

Configuration is loaded from (in order of precedence):
1. Environment variables
2. .env file (if exists, never overriding real environment variables)
3. JSON config file (if given)
4. Default values
"""

from __future__ import annotations
import json
import logging
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ._engine.resolver import DEFAULT_THINK_DELAY_SECONDS

logger = logging.getLogger("confidential_rps")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# {environment variable: config field}
ENV_MAPPINGS = {
    "RPS_THINK_DELAY_SECONDS": "think_delay_seconds",
    "RPS_SEED": "seed",
    "RPS_LOG_FILE": "log_file",
    "RPS_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class GameConfig:
    """Settings for one console session."""
    think_delay_seconds: float = DEFAULT_THINK_DELAY_SECONDS
    seed: Optional[int] = None
    log_file: str = "confidential_rps.log"
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _coerce(field_name: str, value: Any) -> Any:
    """Convert a raw (string or JSON) value to the field's type."""
    if value is None:
        return None
    if field_name == "think_delay_seconds":
        return float(value)
    if field_name == "seed":
        return int(value)
    if field_name == "log_level":
        return str(value).upper()
    return str(value)


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = ".env",
) -> GameConfig:
    """
    Load config from defaults, file, .env and environment.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Path of the .env file to read, or None to skip it

    Returns:
        A validated GameConfig

    Raises:
        ValueError: If a value cannot be converted or fails validation
    """
    values: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
            values.update({k: v for k, v in raw.items() if k in GameConfig.__dataclass_fields__})
        else:
            logger.warning(f"Config file not found: {config_path}")

    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]

    try:
        coerced = {k: _coerce(k, v) for k, v in values.items()}
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid config value: {e}") from e

    config = replace(GameConfig(), **coerced)
    validate_config(config)
    return config


def validate_config(config: GameConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to check

    Raises:
        ValueError: If a value is out of range
    """
    delay = config.think_delay_seconds
    if not math.isfinite(delay) or delay < 0:
        raise ValueError(
            f"think_delay_seconds must be a finite number >= 0, got {delay}"
        )
    if config.log_level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {config.log_level!r}; expected one of {list(LOG_LEVELS)}"
        )
