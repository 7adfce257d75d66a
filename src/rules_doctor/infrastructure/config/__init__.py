"""Configuration adapters."""

from rules_doctor.infrastructure.config.json_config_provider import JsonConfigProvider

__all__ = ["JsonConfigProvider"]
