"""
Pydantic-based configuration models for micromuse.

Settings are read from environment variables (and an optional .env file)
using Pydantic BaseSettings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..logging.logging_config import VALID_ENVIRONMENTS, VALID_FORMATS, get_logger

logger = get_logger(__name__)


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    environment: str = Field(default="local", description="Logging environment")
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="human", description="Log format")
    disable_logging: bool = Field(default=False, description="Disable all logging")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate logging environment."""
        if v not in VALID_ENVIRONMENTS:
            logger.error("Invalid logging environment", environment=v, valid_environments=VALID_ENVIRONMENTS)
            raise ValueError(f"Environment must be one of {VALID_ENVIRONMENTS}, got '{v}'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got '{v}'")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in VALID_FORMATS:
            raise ValueError(f"Log format must be one of {VALID_FORMATS}, got '{v}'")
        return v

    model_config = {"env_prefix": "LOGGING_", "case_sensitive": False, "extra": "ignore"}

    def to_dict(self) -> dict:
        """Return the dictionary shape expected by setup_logging()."""
        return {
            "environment": self.environment,
            "level": self.level,
            "format": self.format,
            "disable_logging": self.disable_logging,
        }


class AppConfig(BaseSettings):
    """
    Composite application configuration.

    Access via the get_config() function.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "case_sensitive": False, "extra": "ignore"}
