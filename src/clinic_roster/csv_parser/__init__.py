"""CSV parser module.

This module loads patient records from CSV files.
"""

from clinic_roster.csv_parser.parser import load_clinic, parse_patients_csv

__all__ = [
    "load_clinic",
    "parse_patients_csv",
]
