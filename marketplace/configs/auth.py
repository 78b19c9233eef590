"""
Authentication configuration settings.

Bearer token signing parameters shared by token issuing and verification.

Dependencies: pydantic_settings
System role: JWT configuration for caller identity
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """JWT signing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JWT_",
        case_sensitive=False,
        extra="ignore",
    )

    secret: str = Field(
        default="change-me-in-production",
        description="HMAC secret used to sign access tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    expiry_hours: int = Field(
        default=24 * 7,
        gt=0,
        description="Access token lifetime in hours",
    )
