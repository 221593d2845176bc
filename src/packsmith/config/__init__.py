"""Configuration module using Pydantic Settings.

Provides typed defaults for the authoring session with environment variable support.

Usage:
    from packsmith.config import PacksmithSettings

    settings = PacksmithSettings(default_namespace="minecraft")
"""

from packsmith.config.settings import PacksmithSettings

__all__ = [
    "PacksmithSettings",
]
