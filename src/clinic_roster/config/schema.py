"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ClinicConfig(BaseModel):
    """Default clinic details for rosters built by the CLI.

    Attributes:
        name: Clinic name
        address: Clinic address
        doctor_count: Number of doctors (negative values are clamped by Clinic)
    """

    name: str = Field(default="Unnamed", description="Clinic name")
    address: str = Field(default="Unknown", description="Clinic address")
    doctor_count: int = Field(default=0, description="Number of doctors")


class ExportConfig(BaseModel):
    """Configuration for roster export.

    Attributes:
        output_path: Default export file path
    """

    output_path: Path = Field(
        default=Path("patients.txt"),
        description="Default export file path"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact PII from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/clinic-roster.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact PII from logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.

        Args:
            v: Log level string

        Returns:
            Validated log level (uppercase)

        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        clinic: Default clinic details
        export: Export settings
        logging: Logging configuration

    Example:
        >>> config = Config(clinic=ClinicConfig(name="City Clinic No. 1"))
        >>> config.clinic.name
        'City Clinic No. 1'
        >>> config.export.output_path
        PosixPath('patients.txt')
    """

    clinic: ClinicConfig = ClinicConfig()
    export: ExportConfig = ExportConfig()
    logging: LoggingConfig = LoggingConfig()
