"""Rules Doctor configuration package."""

from rules_doctor.config.loader import clear_cache, load_config
from rules_doctor.config.models import RulesDoctorConfig

__all__ = ["RulesDoctorConfig", "clear_cache", "load_config"]
