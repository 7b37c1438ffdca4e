"""Roster examples for Clinic Roster.

This module demonstrates building a clinic roster with different patient
types, working through the viewer/admin roles, exporting the roster, and
handling the errors raised by invalid mutations.
"""

import logging

from clinic_roster.models import Clinic, GenericPatient
from clinic_roster.models.roles import Manager, RoleAdmin, RoleViewer
from clinic_roster.utils.exceptions import (
    EmptyRosterError,
    FileSaveError,
    IndexOutOfRangeError,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def example_1_build_roster() -> Clinic:
    """Example 1: Build a roster holding every patient type."""
    print("=" * 80)
    print("EXAMPLE 1: Building a roster")
    print("=" * 80)

    clinic = Clinic("City Clinic No. 1", "10 Main St", 25)
    clinic.add_child("Marta", 7, "Cold", "Mother: +380501112233")
    clinic.add_elder("Petro", 72, "Heart disease", "Penicillin", "Intense physical exertion")
    clinic.add_record(GenericPatient("Oleksii", 40, "Flu"))

    print(clinic.describe())
    print(clinic.describe_patients())
    print()
    return clinic


def example_2_roles(clinic: Clinic) -> None:
    """Example 2: Viewer, admin and manager roles."""
    print("=" * 80)
    print("EXAMPLE 2: Roles")
    print("=" * 80)

    viewer = RoleViewer()
    admin = RoleAdmin()
    manager = Manager()

    admin.add_child_patient(clinic, "Oleh", 12, "Injury", "Father: +380631234567")
    admin.add_elder_patient(clinic, "Iryna", 67, "Diabetes", "None", "High-carbohydrate diet")
    admin.remove_at(clinic, 0)
    admin.add_default_patient(clinic)
    print(viewer.view_clinic(clinic))

    manager.add_child_patient(clinic, "Andrii", 15, "Sprained ligament", "Mother: +380671112233")
    print(manager.view_patients(clinic))
    print()


def example_3_export_and_errors(clinic: Clinic) -> None:
    """Example 3: Export the roster and handle roster errors."""
    print("=" * 80)
    print("EXAMPLE 3: Export and error handling")
    print("=" * 80)

    try:
        path = clinic.export_to_file("patients.txt")
        print(f"Saved to {path}")
    except FileSaveError as e:
        print(f"Save failed: {e}")

    try:
        RoleAdmin().remove_at(clinic, 999)
    except IndexOutOfRangeError as e:
        print(f"Caught IndexOutOfRangeError: {e}")

    empty = Clinic("Empty Clinic", "Unknown address", 0)
    try:
        empty.decrement_in_place()
    except EmptyRosterError as e:
        print(f"Caught EmptyRosterError: {e}")

    try:
        clinic.export_to_file("nonexistent_dir/patients.txt")
    except FileSaveError as e:
        print(f"Caught FileSaveError: {e}")


if __name__ == "__main__":
    roster = example_1_build_roster()
    example_2_roles(roster)
    example_3_export_and_errors(roster)
