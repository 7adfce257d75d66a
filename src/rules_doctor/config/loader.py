"""Configuration loader for Rules Doctor.

Loads the JSON configuration file and returns a validated
RulesDoctorConfig instance. Uses module-level caching so a given file is
only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from rules_doctor.application.error_messages import format_validation_errors
from rules_doctor.config.models import RulesDoctorConfig
from rules_doctor.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, RulesDoctorConfig] = {}

# Default config path — resolved against the working directory
DEFAULT_CONFIG_PATH = Path("config.json")


def load_config(path: Optional[Path | str] = None) -> RulesDoctorConfig:
    """Load and validate the configuration from a JSON file.

    Parameters
    ----------
    path : Path | str | None
        Path to the JSON config file. If ``None``, ``config.json`` in the
        current working directory is used.

    Returns
    -------
    RulesDoctorConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, is not valid JSON, or does not match
        the expected schema.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Failed to load config from {config_path}: {exc}") from exc

    try:
        config = RulesDoctorConfig.model_validate(raw)
    except ValidationError as exc:
        details = "\n".join(f"  - {msg}" for msg in format_validation_errors(exc.errors()))
        raise ConfigurationError(f"Invalid config in {config_path}:\n{details}") from exc

    logger.debug("Loaded %d check(s) from %s", len(config.checks), config_path)
    _config_cache[cache_key] = config
    return config


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
