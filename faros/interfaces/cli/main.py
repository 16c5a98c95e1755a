"""Entry point for the Faros CLI.

Usage:
    python -m faros.interfaces.cli.main

Or via installed entry point:
    faros <command>
"""

from faros.interfaces.cli import app


def main() -> None:
    """Run the Faros CLI application."""
    app()


if __name__ == "__main__":
    main()
