"""Typed runtime settings with dotenv support and startup validation."""

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DISPLAY_VALUE = "abc123"
DEFAULT_IMAGE_DIRECTORY = Path(__file__).resolve().parent.parent / "static" / "img"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the web server runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `display_value` reads from `DISPLAY_VALUE`.

    Attributes:
        display_value: Value shown on the landing page.
        port: Web server port.
        application_host: Host interface for web server binding.
        log_level: Root logging level for the process.
        image_directory: Directory served under `/img`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    display_value: str = Field(default=DEFAULT_DISPLAY_VALUE)
    port: int = Field(default=3000, ge=1, le=65535)
    application_host: str = Field(default="0.0.0.0", min_length=1)
    log_level: str = Field(default="INFO")
    image_directory: Path = Field(default=DEFAULT_IMAGE_DIRECTORY)

    @field_validator("display_value")
    @classmethod
    def _validate_display_value(cls, value: str) -> str:
        # An empty DISPLAY_VALUE behaves like an unset one.
        if not value:
            return DEFAULT_DISPLAY_VALUE
        return value

    @field_validator("application_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
