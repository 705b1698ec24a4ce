"""
twilio_client/core/config.py

Purpose: Environment configuration

- Loads Twilio credentials and endpoints from the environment / .env
- Keeps credentials as SecretStr so they never render in logs
- Validates that the credentials a client needs are present
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.
    Everything is optional here; the client builders decide what is mandatory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Endpoints
    TWILIO_API_BASE_URL: str = Field(
        default="https://api.twilio.com",
        description="Base URL of the Programmable Messaging API"
    )
    TWILIO_VERIFY_BASE_URL: str = Field(
        default="https://verify.twilio.com",
        description="Base URL of the Verify API"
    )

    # Credentials
    TWILIO_ACCOUNT_SID: Optional[SecretStr] = Field(
        default=None,
        description="Twilio account SID, used as the Basic auth username"
    )
    TWILIO_AUTH_TOKEN: Optional[SecretStr] = Field(
        default=None,
        description="Twilio auth token, used as the Basic auth password"
    )
    TWILIO_VERIFY_SERVICE_SID: Optional[SecretStr] = Field(
        default=None,
        description="Verify service SID"
    )

    # Sender
    TWILIO_SENDER_NUMBER: Optional[str] = Field(
        default=None,
        description="Phone number messages are sent from"
    )
    TWILIO_SENDER_COUNTRY: Optional[str] = Field(
        default=None,
        description="Two-letter country of the sender number when it is not in international format"
    )

    # Transport
    TWILIO_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Per-request timeout in seconds"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @field_validator("TWILIO_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v):
        """Timeout must be positive."""
        if v <= 0:
            raise ValueError("TWILIO_TIMEOUT_SECONDS must be greater than zero")
        return v

    @field_validator("TWILIO_SENDER_COUNTRY")
    @classmethod
    def normalize_country(cls, v):
        return v.upper() if v else v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


# Global settings instance
settings = Settings()


def validate_settings(current: Optional[Settings] = None, verify: bool = False) -> bool:
    """
    Checks that the credentials needed by the SMS client (and, with
    ``verify=True``, the Verify client) are present.

    Raises ValueError listing every missing setting. Values are never
    included in the message.
    """
    current = current or settings
    errors = []

    if not current.TWILIO_ACCOUNT_SID:
        errors.append("TWILIO_ACCOUNT_SID is required")
    if not current.TWILIO_AUTH_TOKEN:
        errors.append("TWILIO_AUTH_TOKEN is required")

    if verify:
        if not current.TWILIO_VERIFY_SERVICE_SID:
            errors.append("TWILIO_VERIFY_SERVICE_SID is required")
    elif not current.TWILIO_SENDER_NUMBER:
        errors.append("TWILIO_SENDER_NUMBER is required")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
