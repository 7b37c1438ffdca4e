"""Audit trail functionality for Clinic Roster.

This module provides structured audit logging for roster imports, exports
and merges performed at the command-line boundary.
"""

import time
import uuid
from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)

# Fields rendered first, in this order
FIELD_ORDER = [
    "status",
    "input_file",
    "output_file",
    "record_count",
    "duration",
    "error_message",
    "correlation_id",
]


def log_audit_event(event_type: str, details: Dict[str, Any]) -> None:
    """Log an audit trail event.

    Audit events are logged at INFO level for successful operations and
    ERROR level for failures.

    Args:
        event_type: Type of operation (e.g., "ROSTER_EXPORTED", "ROSTER_MERGED",
                   "EXPORT_FAILED")
        details: Dictionary with event details. Common fields include:
                - input_file: Path to input CSV (if applicable)
                - output_file: Path to the export file
                - record_count: Number of records written
                - status: "success" or "failure"
                - duration: Operation duration in seconds
                - error_message: Error details (if status is failure)

    Example:
        >>> log_audit_event("ROSTER_EXPORTED", {
        ...     "input_file": "patients.csv",
        ...     "output_file": "patients.txt",
        ...     "record_count": 5,
        ...     "status": "success",
        ... })
    """
    if "timestamp" not in details:
        details["timestamp"] = time.time()

    if "correlation_id" not in details:
        details["correlation_id"] = str(uuid.uuid4())

    message_parts = [f"AUDIT [{event_type}]"]

    for field in FIELD_ORDER:
        if field in details:
            value = details[field]
            if field == "duration" and isinstance(value, (int, float)):
                message_parts.append(f"{field}={value:.2f}s")
            else:
                message_parts.append(f"{field}={value}")

    for key, value in details.items():
        if key not in FIELD_ORDER and key != "timestamp":
            message_parts.append(f"{key}={value}")

    audit_message = " | ".join(message_parts)

    status = details.get("status", "unknown")
    if status == "failure":
        logger.error(audit_message)
    else:
        logger.info(audit_message)
