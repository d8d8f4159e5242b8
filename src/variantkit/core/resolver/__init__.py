"""Resolver functionality: the first-match resolution loop and its config."""

from variantkit.core.resolver.core import Resolver, resolve
from variantkit.core.resolver.models import (
    ResolutionTrace,
    ResolverConfig,
    VariantMismatchError,
)

__all__ = [
    "Resolver",
    "resolve",
    "ResolverConfig",
    "ResolutionTrace",
    "VariantMismatchError",
]
