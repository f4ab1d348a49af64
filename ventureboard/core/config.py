"""Configuration management for ventureboard."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage Configuration
    checklist_path: str = Field(
        default="data/checklist.json",
        description="Path of the JSON document holding the checklist state",
    )

    # Bootstrap Configuration
    operator_id: str = Field(default="operator", description="Operator that owns the checklist state")
    default_business_name: str = Field(
        default="My Business", description="Name of the business created when the store is empty"
    )
    default_business_short_name: str | None = Field(
        default=None, description="Display abbreviation of the bootstrap business (derived from name if unset)"
    )

    # Agent Configuration
    openrouter_api_key: str | None = Field(default=None, description="OpenRouter API key for LLM access")
    model_id: str = Field(
        default="anthropic/claude-3.5-sonnet",
        description="Model ID for OpenRouter (defaults to Claude 3.5 Sonnet)",
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    def require_credential(self, field_name: str, service_name: str) -> str:
        """Validate that a required credential is set, raising a clear error if missing.

        Args:
            field_name: Name of the field to check
            service_name: Human-readable service name for error message

        Returns:
            The credential value

        Raises:
            ValueError: If the credential is None or empty
        """
        value = getattr(self, field_name)
        if not value:
            raise ValueError(
                f"{service_name} credential not configured. "
                f"Set {field_name.upper()} environment variable or add to .env file."
            )
        return value

    @property
    def checklist_file(self) -> Path:
        """Resolved path of the checklist document."""
        return Path(self.checklist_path).expanduser()


# Application Constants
class Constants:
    """Application-wide constants."""

    # Persisted document
    SCHEMA_VERSION: int = 2
    LEGACY_SCHEMA_VERSION: int = 1

    # Display caps
    LIST_DISPLAY_CAP: int = 20
    OVERVIEW_DISPLAY_CAP: int = 25
    PROGRESS_BAR_WIDTH: int = 20
    SHORT_ID_LENGTH: int = 8

    # Daily stand-up
    STANDUP_ITEMS_PER_BUSINESS: int = 2
    STANDUP_CROSS_CUTTING_CAP: int = 3

    # Health signal
    STALE_AFTER_DAYS: int = 14

    # User-added tasks sort after the template tasks of a category
    CUSTOM_TASK_ORDER: int = 999


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
