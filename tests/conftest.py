"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from clinic_roster.logging_audit.logger import remove_handlers
from clinic_roster.models.clinic import Clinic
from clinic_roster.models.patient import GenericPatient


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def src_dir(project_root: Path) -> Path:
    """
    Return the src directory path.

    Args:
        project_root: Project root directory fixture.

    Returns:
        Path: Absolute path to the src directory.
    """
    return project_root / "src"


@pytest.fixture
def sample_clinic() -> Clinic:
    """
    Return a clinic holding one patient of each type.

    Returns:
        Clinic: Child, elder and generic patient, in that order.
    """
    clinic = Clinic("City Clinic No. 1", "10 Main St", 25)
    clinic.add_child("Marta", 7, "Cold", "+380501112233")
    clinic.add_elder(
        "Petro", 72, "Heart disease", "Penicillin", "Intense physical exertion"
    )
    clinic.add_record(GenericPatient("Oleksii", 40, "Flu"))
    return clinic


@pytest.fixture
def second_clinic() -> Clinic:
    """
    Return a second clinic with two patients.

    Returns:
        Clinic: Used as the right-hand side of merges.
    """
    clinic = Clinic("Riverside Clinic", "5 River Rd", 4)
    clinic.add_child("Oleh", 12, "Injury", "+380631234567")
    clinic.add_elder("Iryna", 67, "Diabetes", "None", "High-carbohydrate diet")
    return clinic


@pytest.fixture
def patients_csv(tmp_path: Path) -> Path:
    """
    Create a patient CSV file covering every patient type.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Returns:
        Path: Path to the CSV file.
    """
    csv_file = tmp_path / "patients.csv"
    csv_file.write_text(
        "type,name,age,disease,parent_contact,allergies,contraindications\n"
        "Child,Marta,7,Cold,+380501112233,,\n"
        "Elder,Petro,72,Heart disease,,Penicillin,Intense physical exertion\n"
        "Patient,Oleksii,40,Flu,,,\n",
        encoding="utf-8",
    )
    return csv_file


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """
    Remove handlers installed by configure_logging() during a test.

    Yields:
        None
    """
    root_logger = logging.getLogger()
    original_level = root_logger.level
    yield
    remove_handlers(root_logger)
    root_logger.setLevel(original_level)
