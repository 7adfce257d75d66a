"""Rules Doctor — audit a fleet of repositories against declarative file checks."""

__version__ = "0.1.0"
