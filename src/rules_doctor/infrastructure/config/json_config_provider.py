"""JSON config provider — implements ConfigProviderPort.

Wraps the config/loader.py logic.
"""

from __future__ import annotations

from pathlib import Path

from rules_doctor.config.models import RulesDoctorConfig
from rules_doctor.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load Rules Doctor configuration from a JSON file, lazily."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        self._config_path = config_path
        self._config: RulesDoctorConfig | None = None

    def get_config(self) -> RulesDoctorConfig:
        """Return the configuration, loading it on first access."""
        if self._config is None:
            from rules_doctor.config.loader import load_config

            self._config = load_config(self._config_path)
        return self._config
