"""Domain errors — custom exceptions for Rules Doctor.

These exceptions are raised by adapters and domain services and caught by
the application or presentation layers. They carry no infrastructure
dependencies.
"""


class RulesDoctorError(Exception):
    """Base exception for all Rules Doctor errors."""


class ConfigurationError(RulesDoctorError):
    """Raised when configuration is invalid or missing."""


class UnknownCheckError(ConfigurationError):
    """Raised when a check requested by name is not configured."""


class DiscoveryError(RulesDoctorError):
    """Raised when listing repositories from the hosting provider fails."""


class ContentFetchError(RulesDoctorError):
    """Raised when a file's content cannot be fetched."""


class ContentNotFoundError(ContentFetchError):
    """Raised when a file is absent on every branch that was tried."""


class PatternError(RulesDoctorError):
    """Raised when a check pattern is not a valid regular expression."""
