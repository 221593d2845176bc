"""Configuration settings using Pydantic Settings.

Provides the authoring-session defaults injected into the root naming context.

Usage:
    from packsmith.config import PacksmithSettings

    # Load from environment variables (PACKSMITH_*)
    settings = PacksmithSettings()

    # Or override with explicit values
    settings = PacksmithSettings(default_directory="generated")
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PacksmithSettings(BaseSettings):  # type: ignore[misc]
    """Default naming configuration for a datapack.

    Read once when a `Datapack` is built and never mutated afterwards.

    Attributes:
        default_namespace: Namespace the host assumes for bare identifiers.
        default_directory: Directory prefix applied to resources created at the root.

    Environment Variables:
        PACKSMITH_DEFAULT_NAMESPACE
        PACKSMITH_DEFAULT_DIRECTORY
    """

    model_config = SettingsConfigDict(
        env_prefix="PACKSMITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_namespace: str = "minecraft"
    default_directory: str = ""

    @field_validator("default_directory")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        return value.strip("/")
