# Area: Shared
"""
rps_engine._config — Session Configuration
==========================================

Configuration loading, validation and constants.

Precedence (lowest to highest):
    1. CONFIG_DEFAULTS
    2. JSON config file
    3. Environment variables (a ``.env`` file is loaded first, if present)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger("rps_engine")

DEFAULT_RESOLUTION_DELAY_SECONDS = 1.5

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_DEFAULTS: Dict[str, Any] = {
    "resolution_delay_seconds": DEFAULT_RESOLUTION_DELAY_SECONDS,
    "seed": None,
    "strict_busy": False,
    "log_level": "WARNING",
    "log_file": None,
}

# Environment variable -> config key
ENV_MAPPINGS = {
    "RPS_RESOLUTION_DELAY": "resolution_delay_seconds",
    "RPS_SEED": "seed",
    "RPS_STRICT_BUSY": "strict_busy",
    "RPS_LOG_LEVEL": "log_level",
    "RPS_LOG_FILE": "log_file",
}

_TRUE_VALUES = ("true", "1", "yes", "on")


def _parse_env_value(config_key: str, raw: str) -> Any:
    if config_key == "resolution_delay_seconds":
        return float(raw)
    if config_key == "seed":
        return int(raw) if raw.strip() else None
    if config_key == "strict_busy":
        return raw.strip().lower() in _TRUE_VALUES
    if config_key == "log_level":
        return raw.strip().upper()
    return raw or None


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a validated configuration dict.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional path to a .env file (defaults to a .env found
                from the current directory upward)

    Returns:
        Configuration dict with every key of CONFIG_DEFAULTS

    Raises:
        ValueError: If a value cannot be parsed or fails validation
    """
    config: Dict[str, Any] = dict(CONFIG_DEFAULTS)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"Config file {path} must contain a JSON object")
            config.update(data)
        else:
            logger.warning(f"Config file not found: {path}")

    # Without env_file, search upward from the working directory
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            try:
                config[config_key] = _parse_env_value(config_key, os.environ[env_key])
            except ValueError as e:
                raise ValueError(f"Invalid value for {env_key}: {os.environ[env_key]!r}") from e

    validate_config(config)
    return config


def validate_config(config: dict) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration dict

    Raises:
        ValueError: Listing every invalid or unknown key
    """
    problems: List[str] = []

    unknown = sorted(k for k in config if k not in CONFIG_DEFAULTS)
    if unknown:
        problems.append(f"unknown keys: {unknown}")

    delay = config.get("resolution_delay_seconds", DEFAULT_RESOLUTION_DELAY_SECONDS)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        problems.append(f"resolution_delay_seconds must be a number >= 0, got {delay!r}")

    seed = config.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        problems.append(f"seed must be an integer or null, got {seed!r}")

    if not isinstance(config.get("strict_busy", False), bool):
        problems.append(f"strict_busy must be a boolean, got {config.get('strict_busy')!r}")

    level = config.get("log_level", "WARNING")
    if level not in LOG_LEVELS:
        problems.append(f"log_level must be one of {list(LOG_LEVELS)}, got {level!r}")

    log_file = config.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        problems.append(f"log_file must be a path string or null, got {log_file!r}")

    if problems:
        raise ValueError(f"Invalid configuration: {'; '.join(problems)}")
