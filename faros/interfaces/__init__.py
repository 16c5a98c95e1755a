"""Interfaces layer for Faros.

This layer contains adapters for external interactions:
- CLI: Command-line interface using Typer

The interfaces layer is responsible for:
- Accepting user input and validating it
- Calling application services
- Formatting output for the user
- Deciding exit codes
"""

from faros.interfaces.cli import app

__all__ = ["app"]
