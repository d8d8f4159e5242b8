"""Resolver models: configuration, traces, and errors."""

from __future__ import annotations

from dataclasses import dataclass

from variantkit.core.decider.models import DecisionPolicy


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Configuration for resolver behavior.

    Passed to Resolver at construction, or set as `resolver_config` on a
    Buildable class.
    """

    decision_policy: DecisionPolicy = DecisionPolicy.STRICT
    """How malformed decider return values are treated. Default: raise."""

    check_variant: bool = False
    """Require matched types to subclass the base type."""

    seal_on_resolve: bool = False
    """Seal the registry on first resolution, rejecting later registration."""


@dataclass(frozen=True, slots=True)
class ResolutionTrace:
    """Record of one resolution, for debugging decider setups.

    Attributes:
        base: The base type that was resolved.
        resolved: The type the resolution produced.
        matched_index: Position of the matching decider, None if none matched.
        matched_decider: Name of the matching decider, None if none matched.
        evaluated: Number of deciders invoked before the scan stopped.
    """

    base: type
    resolved: type
    matched_index: int | None
    matched_decider: str | None
    evaluated: int

    @property
    def matched(self) -> bool:
        return self.matched_index is not None


class VariantMismatchError(TypeError):
    """Raised when a matched variant does not subclass its base (check_variant)."""

    pass
