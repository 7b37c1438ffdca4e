"""Entry point for running clinic_roster as a module.

This allows the package to be executed as:
    python -m clinic_roster
"""

from clinic_roster.cli.main import cli

if __name__ == "__main__":
    cli()
