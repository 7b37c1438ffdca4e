"""Roster CLI commands for Clinic Roster.

This module provides CLI commands to display, export and merge patient
rosters loaded from CSV files.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Any, Optional

import click

from clinic_roster.config.schema import Config
from clinic_roster.csv_parser.parser import load_clinic
from clinic_roster.logging_audit import log_audit_event
from clinic_roster.models.clinic import Clinic
from clinic_roster.models.roles import RoleViewer
from clinic_roster.utils.exceptions import FileSaveError, ValidationError

logger = logging.getLogger(__name__)


def _get_config(ctx: click.Context) -> Config:
    """Return the loaded configuration, or defaults when run standalone."""
    obj: dict[str, Any] = ctx.obj or {}
    return obj.get("config") or Config()


def _export(clinic: Clinic, output: Path, event_type: str, details: dict[str, Any]) -> None:
    """Export a clinic and record the audit event.

    Exits with code 1 when the file cannot be written.
    """
    start = time.monotonic()
    try:
        clinic.export_to_file(output)
    except FileSaveError as e:
        click.secho(f"Export failed: {e}", fg="red", err=True)
        log_audit_event(event_type, {
            **details,
            "output_file": str(output),
            "status": "failure",
            "error_message": str(e),
        })
        sys.exit(1)

    log_audit_event(event_type, {
        **details,
        "output_file": str(output),
        "record_count": clinic.count(),
        "status": "success",
        "duration": time.monotonic() - start,
    })
    click.secho(
        f"Exported {clinic.count()} patient(s) to {output}", fg="green"
    )


@click.group()
def roster() -> None:
    """Patient roster display, export and merge commands."""
    pass


@roster.command("show")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option("--name", help="Clinic name (default: from configuration)")
@click.option("--address", help="Clinic address (default: from configuration)")
@click.option("--doctors", type=int, help="Number of doctors (default: from configuration)")
@click.pass_context
def show_command(
    ctx: click.Context,
    file: Path,
    name: Optional[str],
    address: Optional[str],
    doctors: Optional[int],
) -> None:
    """Display a clinic roster loaded from a patient CSV file.

    Examples:

        # Show every patient with the configured clinic details
        clinic-roster roster show patients.csv

        # Override the clinic name
        clinic-roster roster show patients.csv --name "City Clinic No. 1"
    """
    config = _get_config(ctx)
    try:
        clinic = load_clinic(
            file,
            name=name or config.clinic.name,
            address=address or config.clinic.address,
            doctor_count=doctors if doctors is not None else config.clinic.doctor_count,
        )
    except ValidationError as e:
        click.secho(f"Validation Error: {e}", fg="red", err=True)
        logger.error(f"Validation error: {e}")
        sys.exit(1)

    viewer = RoleViewer()
    click.echo(viewer.view_clinic(clinic))
    click.echo(viewer.view_patients(clinic))


@roster.command("export")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    help="Export file path (default: from configuration)",
)
@click.option("--name", help="Clinic name (default: from configuration)")
@click.option("--address", help="Clinic address (default: from configuration)")
@click.option("--doctors", type=int, help="Number of doctors (default: from configuration)")
@click.pass_context
def export_command(
    ctx: click.Context,
    file: Path,
    output: Optional[Path],
    name: Optional[str],
    address: Optional[str],
    doctors: Optional[int],
) -> None:
    """Export a patient CSV file to the roster line format.

    Writes one line per patient (TYPE|name|age|disease|...), replacing any
    existing file content. Exits with code 1 if the CSV is invalid or the
    output file cannot be written.

    Examples:

        # Export using the configured output path
        clinic-roster roster export patients.csv

        # Export to an explicit file
        clinic-roster roster export patients.csv --output out/patients.txt
    """
    config = _get_config(ctx)
    output_path = output or config.export.output_path

    try:
        clinic = load_clinic(
            file,
            name=name or config.clinic.name,
            address=address or config.clinic.address,
            doctor_count=doctors if doctors is not None else config.clinic.doctor_count,
        )
    except ValidationError as e:
        click.secho(f"Validation Error: {e}", fg="red", err=True)
        logger.error(f"Validation error: {e}")
        sys.exit(1)

    logger.info(f"Exporting {clinic.count()} patient(s) to {output_path}")
    _export(clinic, output_path, "ROSTER_EXPORTED", {"input_file": str(file)})


@roster.command("merge")
@click.argument("first", type=click.Path(exists=True, path_type=Path))
@click.argument("second", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    help="Export file path (default: from configuration)",
)
@click.option("--name", help="First clinic name (default: from configuration)")
@click.option("--other-name", help="Second clinic name (default: second file name)")
@click.option("--doctors", type=int, help="First clinic doctors (default: from configuration)")
@click.option("--other-doctors", type=int, default=0, show_default=True, help="Second clinic doctors")
@click.pass_context
def merge_command(
    ctx: click.Context,
    first: Path,
    second: Path,
    output: Optional[Path],
    name: Optional[str],
    other_name: Optional[str],
    doctors: Optional[int],
    other_doctors: int,
) -> None:
    """Merge two patient CSV files and export the combined roster.

    The merged roster lists the first file's patients followed by the
    second file's patients.

    Examples:

        clinic-roster roster merge north.csv south.csv --output merged.txt
    """
    config = _get_config(ctx)
    output_path = output or config.export.output_path

    try:
        first_clinic = load_clinic(
            first,
            name=name or config.clinic.name,
            address=config.clinic.address,
            doctor_count=doctors if doctors is not None else config.clinic.doctor_count,
        )
        second_clinic = load_clinic(
            second,
            name=other_name or second.stem,
            doctor_count=other_doctors,
        )
    except ValidationError as e:
        click.secho(f"Validation Error: {e}", fg="red", err=True)
        logger.error(f"Validation error: {e}")
        sys.exit(1)

    merged = first_clinic + second_clinic
    click.echo(RoleViewer().view_clinic(merged))
    _export(
        merged,
        output_path,
        "ROSTER_MERGED",
        {"input_file": f"{first},{second}"},
    )
