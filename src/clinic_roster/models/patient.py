"""Patient record data models.

This module defines the closed set of patient record variants kept in a
clinic roster. Every variant shares the name/age/disease fields and provides
its own description text, its own export line and a clone of itself.

Export line layout (fields separated by ``|``, no escaping):

    Patient|name|age|disease
    Child|name|age|disease|parent_contact
    Elder|name|age|disease|allergies|contraindications
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

FIELD_SEPARATOR = "|"

# Age below which a child patient needs parental permission
ADULT_AGE = 18


class VariantTag(Enum):
    """Tag identifying a record's variant in its export line."""

    PATIENT = "Patient"
    CHILD = "Child"
    ELDER = "Elder"

    @classmethod
    def from_label(cls, label: str) -> "VariantTag":
        """Convert a case-insensitive label into the corresponding tag.

        Args:
            label: Tag label such as "Child" or "elder"

        Returns:
            Matching VariantTag

        Raises:
            ValueError: If label does not name a known variant
        """
        key = label.strip().lower()
        for tag in cls:
            if tag.value.lower() == key:
                return tag
        raise ValueError(
            f"Unknown patient type: {label!r}. "
            f"Must be one of: {', '.join(t.value for t in cls)}"
        )


@dataclass(eq=False)
class PatientRecord:
    """Fields and behavior shared by every patient variant.

    Two records are equal when name and age match, whatever their variant
    or remaining fields.

    Attributes:
        name: Patient name
        age: Age in years (not validated)
        disease: Diagnosis
    """

    tag: ClassVar[VariantTag] = VariantTag.PATIENT
    title: ClassVar[str] = "Patient"

    name: str = "Unknown"
    age: int = 0
    disease: str = "None"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatientRecord):
            return NotImplemented
        return (self.name, self.age) == (other.name, other.age)

    def extra_fields(self) -> tuple[str, ...]:
        """Variant-specific field values, in export order."""
        return ()

    def extra_lines(self) -> list[str]:
        """Variant-specific description lines."""
        return []

    def describe(self) -> str:
        """Return a human-readable multi-line description of the record.

        Example:
            >>> print(GenericPatient("Oleksii", 40, "Flu").describe())
            Patient: Oleksii
              Age: 40
              Disease: Flu
        """
        lines = [
            f"{self.title}: {self.name}",
            f"  Age: {self.age}",
            f"  Disease: {self.disease}",
        ]
        lines.extend(f"  {line}" for line in self.extra_lines())
        return "\n".join(lines)

    def serialize_line(self) -> str:
        """Return the single-line export form of the record.

        Field values are written as-is; a value containing ``|`` produces a
        line that cannot be split back into the original fields.

        Example:
            >>> ChildPatient("Marta", 7, "Cold", "+380501112233").serialize_line()
            'Child|Marta|7|Cold|+380501112233'
        """
        fields = [self.tag.value, self.name, str(self.age), self.disease]
        fields.extend(self.extra_fields())
        return FIELD_SEPARATOR.join(fields)

    def clone(self) -> "PatientRecord":
        """Return an independent copy of the same concrete variant."""
        return dataclasses.replace(self)

    def __copy__(self) -> "PatientRecord":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "PatientRecord":
        return self.clone()


@dataclass(eq=False)
class GenericPatient(PatientRecord):
    """Adult patient with no variant-specific fields."""

    pass


@dataclass(eq=False)
class ChildPatient(PatientRecord):
    """Pediatric patient.

    Attributes:
        parent_contact: How to reach the parent or guardian
    """

    tag: ClassVar[VariantTag] = VariantTag.CHILD
    title: ClassVar[str] = "Child patient"

    parent_contact: str = "No parent contact"

    @property
    def needs_parental_permission(self) -> bool:
        """True while the patient is under ADULT_AGE."""
        return self.age < ADULT_AGE

    def extra_fields(self) -> tuple[str, ...]:
        return (self.parent_contact,)

    def extra_lines(self) -> list[str]:
        permission = "yes" if self.needs_parental_permission else "no"
        return [
            f"Parent contact: {self.parent_contact}",
            f"Needs parental permission: {permission}",
        ]


@dataclass(eq=False)
class ElderPatient(PatientRecord):
    """Elderly patient with medical warnings.

    Attributes:
        allergies: Known allergies
        contraindications: Treatments or activities to avoid
    """

    tag: ClassVar[VariantTag] = VariantTag.ELDER
    title: ClassVar[str] = "Elder patient"

    allergies: str = "None"
    contraindications: str = "None"

    def extra_fields(self) -> tuple[str, ...]:
        return (self.allergies, self.contraindications)

    def extra_lines(self) -> list[str]:
        return [
            f"Allergies: {self.allergies}",
            f"Contraindications: {self.contraindications}",
        ]


# Variant classes keyed by tag, used when building records from tabular input
PATIENT_TYPES: dict[VariantTag, type[PatientRecord]] = {
    VariantTag.PATIENT: GenericPatient,
    VariantTag.CHILD: ChildPatient,
    VariantTag.ELDER: ElderPatient,
}
