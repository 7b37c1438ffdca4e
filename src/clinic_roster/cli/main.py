"""clinic-roster command group.

Global options load settings and set up logging once per invocation; the
roster subcommands live in roster_commands.
"""

from pathlib import Path
from typing import Optional

import click

from clinic_roster import __version__
from clinic_roster.cli.roster_commands import roster
from clinic_roster.config import load_config
from clinic_roster.logging_audit import configure_logging
from clinic_roster.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="clinic-roster")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="JSON settings file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Show DEBUG messages on the console")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the log here instead of the configured file",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Mask patient names and phone numbers in log output",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """Clinic Roster - manage and export a clinic's patient roster.

    Builds rosters of generic, child and elder patients from CSV files and
    exports them in the one-line-per-patient text format.

    Common usage:

        # Show a roster loaded from CSV
        clinic-roster roster show patients.csv

        # Export a roster to the line format
        clinic-roster roster export patients.csv --output patients.txt

        # Merge two rosters and export the result
        clinic-roster roster merge first.csv second.csv --output merged.txt

    Run any command with --help for its options.
    """
    ctx.ensure_object(dict)

    try:
        settings = load_config(config)
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["config"] = settings
    ctx.obj["verbose"] = verbose

    # Flags win over settings
    configure_logging(
        level="DEBUG" if verbose else settings.logging.level,
        log_file=log_file or settings.logging.log_file,
        redact_pii=redact_pii or settings.logging.redact_pii,
    )


cli.add_command(roster)


@cli.group()
def config() -> None:
    """Inspect clinic-roster settings."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Check a settings file and print the resolved values.

    Exits with code 1 when the file fails validation.

    Example:
        clinic-roster config validate config/config.json
    """
    try:
        settings = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)

    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")
    sections = {
        "Clinic": [
            ("Name", settings.clinic.name),
            ("Address", settings.clinic.address),
            ("Doctors", settings.clinic.doctor_count),
        ],
        "Export": [("Output path", settings.export.output_path)],
        "Logging": [
            ("Level", settings.logging.level),
            ("Log file", settings.logging.log_file),
            ("Redact PII", settings.logging.redact_pii),
        ],
    }
    for title, rows in sections.items():
        click.echo(f"\n{title}:")
        for label, value in rows:
            click.echo(f"  {label + ':':<13}{value}")


@cli.command()
def version() -> None:
    """Print the installed clinic-roster version."""
    click.echo(f"clinic-roster version {__version__}")


if __name__ == "__main__":
    cli()
