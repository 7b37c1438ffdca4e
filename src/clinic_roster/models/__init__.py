"""Models module.

This module provides the patient record variants and the clinic roster.
"""

from clinic_roster.models.clinic import Clinic
from clinic_roster.models.patient import (
    ChildPatient,
    ElderPatient,
    GenericPatient,
    PatientRecord,
    VariantTag,
)

__all__ = [
    "ChildPatient",
    "Clinic",
    "ElderPatient",
    "GenericPatient",
    "PatientRecord",
    "VariantTag",
]
