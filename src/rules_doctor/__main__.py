"""Allow ``python -m rules_doctor``."""

from rules_doctor.presentation.cli.app import app

app()
