"""Port: Configuration provider — supply the checks and repository sources."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigProviderPort(ABC):
    """Contract for providing configuration to the application.

    The concrete return type is ``Any`` at the domain level; the config
    package's ``RulesDoctorConfig`` provides the typed contract.
    """

    @abstractmethod
    def get_config(self) -> Any:
        """Return the configuration for this run."""
        ...
