"""Viewer and administrator roles for a clinic.

Roles hold no state of their own; they delegate to the clinic's public
operations. Errors raised by the clinic propagate unchanged.
"""

from clinic_roster.models.clinic import Clinic


class RoleViewer:
    """Read-only access: render clinic and patient descriptions."""

    def view_clinic(self, clinic: Clinic) -> str:
        return clinic.describe()

    def view_patients(self, clinic: Clinic) -> str:
        return clinic.describe_patients()


class RoleAdmin:
    """Mutating access: add and remove patients."""

    def add_default_patient(self, clinic: Clinic) -> None:
        clinic.add_default_patient()

    def add_child_patient(
        self,
        clinic: Clinic,
        name: str,
        age: int,
        disease: str,
        parent_contact: str,
    ) -> None:
        clinic.add_child(name, age, disease, parent_contact)

    def add_elder_patient(
        self,
        clinic: Clinic,
        name: str,
        age: int,
        disease: str,
        allergies: str,
        contraindications: str,
    ) -> None:
        clinic.add_elder(name, age, disease, allergies, contraindications)

    def remove_at(self, clinic: Clinic, index: int) -> None:
        """Remove a patient by position.

        Raises:
            IndexOutOfRangeError: If index is out of range
        """
        clinic.remove_at(index)


class Manager(RoleViewer, RoleAdmin):
    """Both viewing and administrative access."""

    pass
