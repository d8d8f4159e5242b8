"""Configuration settings using Pydantic Settings.

Provides resolver configuration with environment variable support.

Usage:
    from variantkit.config import ResolverSettings

    # Load from environment variables (VARIANTKIT_*)
    settings = ResolverSettings()
    resolver = Resolver(registry, settings.to_config())

    # Or override with explicit values
    settings = ResolverSettings(decision_policy="lenient")
"""

from __future__ import annotations

from typing import Literal

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install variantkit[config]"
    ) from e

from variantkit.core.decider import DecisionPolicy
from variantkit.core.resolver import ResolverConfig


class ResolverSettings(BaseSettings):  # type: ignore[misc]
    """Resolver configuration loaded from the environment.

    Attributes:
        decision_policy: "strict" raises on malformed decider return values,
            "lenient" warns and treats them as no match.
        check_variant: Require matched types to subclass the base type.
        seal_on_resolve: Seal registries on their first resolution.

    Environment Variables:
        VARIANTKIT_DECISION_POLICY
        VARIANTKIT_CHECK_VARIANT
        VARIANTKIT_SEAL_ON_RESOLVE
    """

    model_config = SettingsConfigDict(
        env_prefix="VARIANTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    decision_policy: Literal["strict", "lenient"] = "strict"
    check_variant: bool = False
    seal_on_resolve: bool = False

    def to_config(self) -> ResolverConfig:
        """Build the ResolverConfig these settings describe."""
        return ResolverConfig(
            decision_policy=DecisionPolicy[self.decision_policy.upper()],
            check_variant=self.check_variant,
            seal_on_resolve=self.seal_on_resolve,
        )
