"""Configuration module using Pydantic Settings.

Usage:
    from variantkit.config import ResolverSettings

    config = ResolverSettings(check_variant=True).to_config()
"""

from variantkit.config.settings import ResolverSettings

__all__ = [
    "ResolverSettings",
]
