"""Custom exception classes for Clinic Roster.

All exceptions inherit from ClinicRosterError to allow catching all custom exceptions.
"""

from pathlib import Path
from typing import Optional, Union


class ClinicRosterError(Exception):
    """Base exception for all Clinic Roster custom exceptions."""

    pass


class EmptyRosterError(ClinicRosterError, IndexError):
    """Raised when a tail removal is attempted on a roster with no records.

    Examples:
        - remove_last() on an empty clinic
        - decrement_in_place() on an empty clinic
    """

    pass


class IndexOutOfRangeError(ClinicRosterError, IndexError):
    """Raised when a positional removal targets a position past the end.

    Attributes:
        index: Requested position
        count: Number of records at the time of the request
    """

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(
            f"Patient index {index} is out of range for a roster of {count} record(s)"
        )


class FileSaveError(ClinicRosterError):
    """Raised when the export target cannot be opened for writing.

    Examples:
        - Parent directory does not exist
        - Permission denied
        - Target path is a directory
    """

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None) -> None:
        self.path = Path(path)
        message = f"Cannot open file for writing: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ValidationError(ClinicRosterError):
    """Raised when patient input data fails validation.

    Examples:
        - Missing required CSV columns
        - Unknown patient type
        - Non-numeric age
    """

    pass


class ConfigurationError(ClinicRosterError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Configuration value out of range
    """

    pass
