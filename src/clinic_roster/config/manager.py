"""Load clinic-roster settings.

Settings are layered: built-in defaults, then the JSON config file, then
CLINIC_ROSTER_* environment variables (a ``.env`` file in the working
directory counts as environment). CLI flags are applied on top by the
commands themselves.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from clinic_roster.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from clinic_roster.config.schema import Config
from clinic_roster.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "CLINIC_ROSTER_"


def _parse_bool(value: str) -> bool:
    """Interpret true/1/yes/on (any case) as True."""
    return value.lower() in ("true", "1", "yes", "on")


# Environment suffix -> (config section, field, converter)
ENV_OVERRIDES: dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "NAME": ("clinic", "name", str),
    "ADDRESS": ("clinic", "address", str),
    "DOCTOR_COUNT": ("clinic", "doctor_count", int),
    "OUTPUT_PATH": ("export", "output_path", str),
    "LOG_LEVEL": ("logging", "level", str),
    "LOG_FILE": ("logging", "log_file", str),
    "REDACT_PII": ("logging", "redact_pii", _parse_bool),
}


def load_config(config_path: Optional[Path] = None) -> Config:
    """Build the validated settings for one CLI run.

    Args:
        config_path: JSON config file; ./config/config.json when None. A
            missing file is not an error and yields the defaults.

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If the file is unreadable or not a JSON object,
            an override cannot be converted, or a value fails validation

    Example:
        >>> config = load_config(Path("config/clinic.json"))
        >>> config.clinic.doctor_count
        25
    """
    load_dotenv(find_dotenv(usecwd=True))

    path = Path(config_path) if config_path is not None else Path(DEFAULT_CONFIG_PATH)
    settings = _apply_env_overrides(_load_config_file(path))

    try:
        return Config(**settings)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Check the values in {path} and any {ENV_PREFIX}* variables."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Read the JSON config file, or a fresh copy of the defaults if absent."""
    if not config_path.exists():
        logger.info(f"No config file at {config_path}; using defaults")
        return json.loads(json.dumps(DEFAULT_CONFIG))

    try:
        settings = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file {config_path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigurationError(
            f"Config file must contain a JSON object: {config_path}"
        )
    logger.info(f"Loaded configuration from {config_path}")
    return settings


def _apply_env_overrides(settings: dict[str, Any]) -> dict[str, Any]:
    """Copy set CLINIC_ROSTER_* variables into their config sections.

    Empty variables are ignored.

    Raises:
        ConfigurationError: If a value cannot be converted, e.g. a
            non-numeric CLINIC_ROSTER_DOCTOR_COUNT
    """
    for suffix, (section, field, convert) in ENV_OVERRIDES.items():
        env_name = f"{ENV_PREFIX}{suffix}"
        raw = os.getenv(env_name)
        if not raw:
            continue
        try:
            value = convert(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid {env_name}: {raw!r}. Must be an integer"
            ) from e
        settings.setdefault(section, {})[field] = value
        logger.debug(f"Override: {section}.{field} from {env_name}")
    return settings
