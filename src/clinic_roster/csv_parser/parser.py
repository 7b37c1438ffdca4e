"""CSV parser for patient rosters.

This module loads patient records from CSV files so that rosters can be
built and exported from the command line.

CSV layout:
    type,name,age,disease[,parent_contact][,allergies][,contraindications]

``type`` is Patient, Child or Elder (case-insensitive). Variant-specific
columns are only read for the matching type; empty cells fall back to the
variant's default value.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from clinic_roster.models.clinic import Clinic
from clinic_roster.models.patient import (
    FIELD_SEPARATOR,
    PATIENT_TYPES,
    PatientRecord,
    VariantTag,
)
from clinic_roster.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Required CSV columns
REQUIRED_COLUMNS = ["type", "name", "age", "disease"]

# Optional CSV columns
OPTIONAL_COLUMNS = ["parent_contact", "allergies", "contraindications"]

# Variant-specific columns mapped to dataclass field names
VARIANT_COLUMNS: dict[VariantTag, list[str]] = {
    VariantTag.PATIENT: [],
    VariantTag.CHILD: ["parent_contact"],
    VariantTag.ELDER: ["allergies", "contraindications"],
}


def parse_patients_csv(file_path: Union[str, Path]) -> list[PatientRecord]:
    """Parse patient records from a CSV file.

    All row errors are collected and reported together.

    Args:
        file_path: Path to CSV file containing patient data

    Returns:
        Patient records in file order

    Raises:
        ValidationError: If required columns are missing or rows are invalid
        FileNotFoundError: If CSV file does not exist
    """
    file_path = Path(file_path)
    logger.info(f"Loading patient CSV from {file_path}")

    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    # Read every cell as text; ages are converted per row
    try:
        df = pd.read_csv(file_path, encoding="utf-8", dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise ValidationError(
            f"CSV file {file_path} is empty. "
            f"Required columns are: {', '.join(REQUIRED_COLUMNS)}"
        )
    except Exception as e:
        raise ValidationError(
            f"Failed to read CSV file {file_path}. Ensure file is valid CSV with UTF-8 encoding. Error: {e}"
        ) from e

    df.columns = [str(col).strip().lower() for col in df.columns]

    missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_columns:
        raise ValidationError(
            f"Missing required columns: {', '.join(missing_columns)}. "
            f"Required columns are: {', '.join(REQUIRED_COLUMNS)}"
        )

    all_valid_columns = set(REQUIRED_COLUMNS + OPTIONAL_COLUMNS)
    unknown_columns = [col for col in df.columns if col not in all_valid_columns]
    if unknown_columns:
        logger.warning(
            f"CSV contains unknown columns that will be ignored: {', '.join(unknown_columns)}"
        )

    records: list[PatientRecord] = []
    errors: list[str] = []

    for idx, row in df.iterrows():
        row_num = idx + 2  # +1 for header, +1 for 1-indexed
        try:
            records.append(_build_record(row))
        except ValueError as e:
            errors.append(f"Row {row_num}: {e}")

    if errors:
        raise ValidationError(
            f"Found {len(errors)} validation error(s) in CSV:\n  - "
            + "\n  - ".join(errors)
        )

    logger.info(f"Successfully parsed {len(records)} patient record(s)")
    return records


def load_clinic(
    file_path: Union[str, Path],
    name: str = "Unnamed",
    address: str = "Unknown",
    doctor_count: int = 0,
) -> Clinic:
    """Build a clinic whose roster holds the records of a patient CSV.

    Args:
        file_path: Path to CSV file containing patient data
        name: Clinic name
        address: Clinic address
        doctor_count: Number of doctors

    Returns:
        Clinic populated in file order

    Raises:
        ValidationError: If the CSV is invalid
        FileNotFoundError: If CSV file does not exist
    """
    records = parse_patients_csv(file_path)
    return Clinic(name, address, doctor_count, records)


def _build_record(row: "pd.Series[Any]") -> PatientRecord:
    """Build one patient record from a CSV row.

    Raises:
        ValueError: If type, name or age is invalid, or a text field
            contains the export field separator
    """
    tag = VariantTag.from_label(_cell(row, "type") or "")

    name = _cell(row, "name")
    if not name:
        raise ValueError("Missing required field 'name'")

    age_text = _cell(row, "age")
    try:
        age = int(age_text) if age_text is not None else None
    except ValueError:
        age = None
    if age is None:
        raise ValueError(f"Invalid age: {age_text!r}. Must be a whole number")

    kwargs: dict[str, Union[str, int]] = {"name": name, "age": age}
    disease = _cell(row, "disease")
    if disease:
        kwargs["disease"] = disease

    for column in VARIANT_COLUMNS[tag]:
        value = _cell(row, column)
        if value:
            kwargs[column] = value

    for field, value in kwargs.items():
        if isinstance(value, str) and FIELD_SEPARATOR in value:
            raise ValueError(
                f"Field '{field}' must not contain '{FIELD_SEPARATOR}': {value!r}"
            )

    record_cls = PATIENT_TYPES[tag]
    return record_cls(**kwargs)


def _cell(row: "pd.Series[Any]", column: str) -> Optional[str]:
    """Return a stripped cell value, or None when the column is absent or blank."""
    if column not in row.index:
        return None
    value = row[column]
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None
