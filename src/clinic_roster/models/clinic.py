"""Clinic roster container.

This module defines the Clinic class, the ordered and mutable collection of
patient records owned by a clinic. The clinic exclusively owns its records:
every record that enters a clinic (add, copy, merge) is cloned on the way in,
so no record object is ever shared between two clinics.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from clinic_roster.models.patient import (
    ChildPatient,
    ElderPatient,
    GenericPatient,
    PatientRecord,
)
from clinic_roster.utils.exceptions import (
    EmptyRosterError,
    FileSaveError,
    IndexOutOfRangeError,
)

logger = logging.getLogger(__name__)

MERGED_NAME_SEPARATOR = " + "


class Clinic:
    """A clinic and the ordered roster of patient records it owns.

    Insertion order is the canonical order of the roster. Records equal by
    value may appear more than once.

    Attributes:
        name: Clinic name
        address: Clinic address
        doctor_count: Number of doctors (negative input is clamped to 0)

    Example:
        >>> clinic = Clinic("City Clinic No. 1", "10 Main St", 25)
        >>> clinic.add_child("Marta", 7, "Cold", "+380501112233")
        >>> clinic.count()
        1
        >>> clinic.record_at(0).serialize_line()
        'Child|Marta|7|Cold|+380501112233'
    """

    def __init__(
        self,
        name: str = "Unnamed",
        address: str = "Unknown",
        doctor_count: int = 0,
        records: Optional[Iterable[PatientRecord]] = None,
    ) -> None:
        self.name = name
        self.address = address
        self.doctor_count = max(doctor_count, 0)
        self._records: list[PatientRecord] = []
        if records is not None:
            self._records.extend(record.clone() for record in records)

    @classmethod
    def from_clinic(cls, source: "Clinic") -> "Clinic":
        """Create an independent deep copy of another clinic.

        Args:
            source: Clinic to copy

        Returns:
            Clinic with the same scalar fields and a fresh clone of every
            source record, in the same order
        """
        return cls(source.name, source.address, source.doctor_count, source._records)

    def copy(self) -> "Clinic":
        """Return an independent deep copy of this clinic."""
        return self.from_clinic(self)

    def __copy__(self) -> "Clinic":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Clinic":
        return self.copy()

    # -------------------
    # Adding records
    # -------------------

    def add_record(self, record: PatientRecord) -> None:
        """Append a clone of a record to the end of the roster."""
        self._records.append(record.clone())
        logger.debug("Added %s record to %s", record.tag.value, self.name)

    def add_default_patient(self) -> None:
        """Append a default-constructed generic patient."""
        self.add_record(GenericPatient())

    def add_child(
        self, name: str, age: int, disease: str, parent_contact: str
    ) -> None:
        """Build a child patient and append it to the roster."""
        self.add_record(ChildPatient(name, age, disease, parent_contact))

    def add_elder(
        self,
        name: str,
        age: int,
        disease: str,
        allergies: str,
        contraindications: str,
    ) -> None:
        """Build an elder patient and append it to the roster."""
        self.add_record(ElderPatient(name, age, disease, allergies, contraindications))

    # -------------------
    # Removing records
    # -------------------

    def remove_last(self) -> None:
        """Remove the tail record.

        Raises:
            EmptyRosterError: If the roster has no records
        """
        if not self._records:
            raise EmptyRosterError(f"No patients to remove from {self.name}")
        removed = self._records.pop()
        logger.debug("Removed last record (%s) from %s", removed.tag.value, self.name)

    def remove_at(self, index: int) -> None:
        """Remove the record at a zero-based position.

        Subsequent records shift down by one. Negative positions are out of
        range rather than counted from the end.

        Args:
            index: Position of the record to remove

        Raises:
            IndexOutOfRangeError: If index is negative or >= count()
        """
        if index < 0 or index >= len(self._records):
            raise IndexOutOfRangeError(index, len(self._records))
        del self._records[index]
        logger.debug("Removed record at index %d from %s", index, self.name)

    # -------------------
    # Read access
    # -------------------

    def count(self) -> int:
        """Return the number of records in the roster."""
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PatientRecord]:
        return iter(self._records)

    def record_at(self, index: int) -> Optional[PatientRecord]:
        """Return the record at a position, or None when out of range.

        The returned record is the roster's own object; do not keep it past
        the next mutation of the roster.
        """
        if 0 <= index < len(self._records):
            return self._records[index]
        return None

    def describe(self) -> str:
        """Return a one-line summary of the clinic."""
        return (
            f"Clinic '{self.name}' at {self.address} | "
            f"doctors: {self.doctor_count} | patients: {self.count()}"
        )

    def describe_patients(self) -> str:
        """Return the description of every record, in roster order."""
        if not self._records:
            return "  [no patients]"
        return "\n".join(record.describe() for record in self._records)

    # -------------------
    # Merging
    # -------------------

    def merge(self, other: "Clinic") -> "Clinic":
        """Return a new clinic combining this clinic and another.

        The result is named "<this> + <other>", has the summed doctor count,
        and holds clones of this clinic's records followed by clones of the
        other clinic's records. Neither input is modified.
        """
        merged = self.copy()
        return merged.merge_in_place(other)

    def merge_in_place(self, other: "Clinic") -> "Clinic":
        """Append clones of another clinic's records to this clinic.

        Uses the same naming and doctor count rule as merge(). Merging a
        clinic with itself doubles its records.

        Returns:
            This clinic
        """
        incoming = [record.clone() for record in other._records]
        self.name = f"{self.name}{MERGED_NAME_SEPARATOR}{other.name}"
        self.doctor_count += other.doctor_count
        self._records.extend(incoming)
        logger.debug("Merged %d record(s) into %s", len(incoming), self.name)
        return self

    def __add__(self, other: "Clinic") -> "Clinic":
        if not isinstance(other, Clinic):
            return NotImplemented
        return self.merge(other)

    def __iadd__(self, other: "Clinic") -> "Clinic":
        if not isinstance(other, Clinic):
            return NotImplemented
        return self.merge_in_place(other)

    # -------------------
    # Equality
    # -------------------

    def equals(self, other: "Clinic") -> bool:
        """Return True when both clinics hold the same number of records.

        Record content, names and addresses are not compared. This matches
        the historical behavior of the roster and is kept for compatibility.
        """
        return self.count() == other.count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clinic):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # -------------------
    # Increment / decrement
    # -------------------

    def increment_in_place(self) -> "Clinic":
        """Append one default patient and return this clinic."""
        self.add_default_patient()
        return self

    def increment_postfix(self) -> "Clinic":
        """Append one default patient and return a copy of the prior state."""
        previous = self.copy()
        self.add_default_patient()
        return previous

    def decrement_in_place(self) -> "Clinic":
        """Remove the tail record and return this clinic.

        Raises:
            EmptyRosterError: If the roster has no records
        """
        self.remove_last()
        return self

    def decrement_postfix(self) -> "Clinic":
        """Remove the tail record and return a copy of the prior state.

        Raises:
            EmptyRosterError: If the roster has no records
        """
        previous = self.copy()
        self.remove_last()
        return previous

    # -------------------
    # Export
    # -------------------

    def export_to_file(self, path: Union[str, Path]) -> Path:
        """Write one export line per record to a text file.

        Existing content is truncated. The file is UTF-8 with one record per
        line, in roster order. The whole payload is encoded before the file
        is opened, so a record that cannot be encoded leaves the target
        untouched. The roster itself is never modified.

        Args:
            path: Destination file path

        Returns:
            Path of the written file

        Raises:
            FileSaveError: If the file cannot be opened or written
        """
        file_path = Path(path)
        lines = [record.serialize_line() for record in self._records]
        try:
            payload = "".join(line + "\n" for line in lines).encode("utf-8")
            with file_path.open("wb") as f:
                f.write(payload)
        except UnicodeEncodeError as e:
            logger.debug("Failed to encode export of %s: %s", self.name, e)
            raise FileSaveError(file_path, f"cannot encode as UTF-8: {e.reason}") from e
        except OSError as e:
            logger.debug("Failed to export %s to %s: %s", self.name, file_path, e)
            raise FileSaveError(file_path, e.strerror or str(e)) from e
        logger.debug("Exported %d record(s) to %s", len(lines), file_path)
        return file_path

    def __repr__(self) -> str:
        return (
            f"Clinic(name={self.name!r}, address={self.address!r}, "
            f"doctor_count={self.doctor_count!r}, records={self._records!r})"
        )
