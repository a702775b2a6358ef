"""Configuration management using Pydantic Settings.

NO try-catch blocks - let Pydantic raise ValidationError if env vars are invalid.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SQSReceiverConfig(BaseSettings):
    """Global configuration - loads from SQS_RECEIVER_* environment variables or .env file."""

    # AWS
    aws_region: str = Field(default="us-east-2", description="AWS region")
    aws_profile: str | None = Field(default=None, description="AWS profile name")
    endpoint_url: str | None = Field(default=None, description="Alternative SQS endpoint, e.g. a local emulator")

    # Polling
    max_messages: int = Field(default=1, ge=1, le=10, description="MaxNumberOfMessages per receive call")
    poll_wait_seconds: int = Field(default=2, ge=0, le=20, description="Long poll wait for each receive call")
    purge_before_poll: bool = Field(default=False, description="Purge the queue before polling starts")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root log level for the CLI"
    )

    model_config = SettingsConfigDict(
        env_prefix="SQS_RECEIVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


# Singleton instance
config = SQSReceiverConfig()
