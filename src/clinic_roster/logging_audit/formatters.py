"""Custom log formatters for Clinic Roster.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Formatter that redacts Personally Identifiable Information (PII) from log messages.

    Regex patterns identify patient names and phone numbers (parent contacts)
    and replace them with fixed markers.

    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction

    Example:
        >>> formatter = PIIRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii

        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # International phone numbers: +380501112233
            (re.compile(r'\+\d{7,15}\b'), '[PHONE-REDACTED]'),

            # Domestic phone numbers: 555-123-4567
            (re.compile(r'\b\d{3}-\d{3}-\d{4}\b'), '[PHONE-REDACTED]'),

            # Matches: name="Marta", name='Petro', name=Oleksii
            (re.compile(r"name=[\"']?([^\"',)]+)[\"']?"), 'name=[NAME-REDACTED]'),

            # Matches: "Patient: Marta", "Child patient: Oleh Ivanenko"
            (re.compile(r'((?:Patient|patient|Name)):\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)'),
             r'\1: [NAME-REDACTED]'),
        ]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with PII redacted if enabled
        """
        original = super().format(record)

        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)

        return original
