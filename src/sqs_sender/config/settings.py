"""
Module: settings.py
Description: Sender configuration using pydantic-settings.

Reads sender settings from environment variables with validation and
defaults. Supports .env files for local development. AWS fields left
unset fall through to boto3's ambient configuration chain.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Sender settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="sqs-json-sender", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")

    # AWS settings
    aws_region: Optional[str] = Field(
        default=None,
        description="AWS region; resolved from the ambient chain when unset"
    )
    aws_profile: Optional[str] = Field(
        default=None,
        description="Named AWS profile from the shared config/credentials files"
    )
    aws_endpoint_url: Optional[str] = Field(
        default=None,
        description="Alternate SQS endpoint, e.g. a local emulator"
    )

    # SQS settings
    queue_url: Optional[str] = Field(
        default=None,
        description="Default destination queue URL"
    )

    @field_validator('aws_region', 'aws_profile', 'aws_endpoint_url', 'queue_url', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('aws_endpoint_url', 'queue_url')
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate URLs use an HTTP scheme."""
        if v is None:
            return v
        v = v.strip()
        if not v.startswith(('http://', 'https://')):
            raise ValueError("URL must start with http:// or https://")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


# Global settings instance
settings = Settings()
