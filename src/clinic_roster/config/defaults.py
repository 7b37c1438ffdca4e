"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "clinic": {
        "name": "Unnamed",
        "address": "Unknown",
        "doctor_count": 0,
    },
    "export": {
        "output_path": "patients.txt",
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/clinic-roster.log",
        # Do not redact PII by default (user must opt-in for privacy)
        "redact_pii": False,
    },
}

DEFAULT_CONFIG_PATH = "config/config.json"
