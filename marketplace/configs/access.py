"""
Access policy configuration.

Switches that change how the resource access evaluator orders its rules.

Dependencies: pydantic_settings
System role: Access policy tuning
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccessPolicySettings(BaseSettings):
    """Access policy flags."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ACCESS_",
        case_sensitive=False,
        extra="ignore",
    )

    owner_bypasses_publish_gate: bool = Field(
        default=False,
        description=(
            "Let the owning instructor read their own unpublished course. "
            "When False, unpublished courses are NotFound for every caller."
        ),
    )
