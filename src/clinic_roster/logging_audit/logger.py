"""Root logger setup for clinic-roster.

Console output follows the requested level; the rotating log file always
receives DEBUG records so exports and merges can be traced after the fact.
Roster model code only logs at DEBUG, so patient details reach the console
only with --verbose.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .formatters import PIIRedactingFormatter

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = Path("logs") / "clinic-roster.log"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FILE_ENV_VAR = "CLINIC_ROSTER_LOG_FILE"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    redact_pii: bool = False,
) -> None:
    """Install the console and rotating file handlers on the root logger.

    Handlers from an earlier call are replaced, so the CLI and tests may call
    this repeatedly.

    Args:
        level: Console level name, case-insensitive
        log_file: Log file path; falls back to CLINIC_ROSTER_LOG_FILE and then
            logs/clinic-roster.log
        redact_pii: Mask patient names and phone numbers in every handler

    Raises:
        ValueError: If level is not a standard level name
        RuntimeError: If the log directory cannot be created

    Example:
        >>> configure_logging(level="DEBUG", log_file=Path("logs/export.log"))
    """
    console_level = _parse_level(level)
    log_path = _resolve_log_file(log_file)

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(
            f"Cannot create log directory {log_path.parent}: {e}"
        ) from e

    root = logging.getLogger()
    remove_handlers(root)
    root.setLevel(logging.DEBUG)

    formatter = PIIRedactingFormatter(fmt=DEFAULT_LOG_FORMAT, redact_pii=redact_pii)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    root.addHandler(console)

    try:
        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        root.warning(f"Log file {log_path} unavailable ({e}); logging to console only")
        return

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)


def _parse_level(level: str) -> int:
    name = level.upper()
    if name not in LEVEL_NAMES:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(LEVEL_NAMES)}"
        )
    return getattr(logging, name)


def _resolve_log_file(log_file: Optional[Path]) -> Path:
    if log_file is not None:
        return Path(log_file)
    env_value = os.environ.get(LOG_FILE_ENV_VAR)
    return Path(env_value) if env_value else DEFAULT_LOG_FILE


def get_logger(module_name: str) -> logging.Logger:
    """Return the logger for a module; pass __name__."""
    return logging.getLogger(module_name)


def remove_handlers(target: logging.Logger) -> None:
    """Detach and close the handlers configure_logging() installed.

    Only handlers using PIIRedactingFormatter are touched; pytest's capture
    handlers and any installed by a host application stay attached.

    Args:
        target: Logger to clean up, normally the root logger
    """
    for handler in list(target.handlers):
        if isinstance(handler.formatter, PIIRedactingFormatter):
            target.removeHandler(handler)
            handler.close()
