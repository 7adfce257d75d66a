"""Command-line interface."""

from rules_doctor.presentation.cli.app import app

__all__ = ["app"]
