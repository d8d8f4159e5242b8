"""Core functionalities: decisions, registries, and resolution.

Architecture Note:
    decider/ holds the per-type registries (the only mutable state, written
    during setup). resolver/ is the stateless first-match evaluator over a
    registry. variant/ layers the class-level Buildable API on top of both.
"""

from variantkit.core.decider import (
    NO_MATCH,
    Decider,
    DeciderRegistry,
    DeciderReturn,
    Decision,
    DecisionPolicy,
    InvalidDecisionError,
    Match,
    NoMatch,
    RegistrySealedError,
    TypeRegistry,
    decider,
    get_registry,
    normalize_decision,
)
from variantkit.core.resolver import (
    ResolutionTrace,
    Resolver,
    ResolverConfig,
    VariantMismatchError,
    resolve,
)
from variantkit.core.variant import Buildable

__all__ = [
    # Decider
    "Match",
    "NoMatch",
    "NO_MATCH",
    "Decision",
    "Decider",
    "DeciderReturn",
    "DecisionPolicy",
    "decider",
    "get_registry",
    "DeciderRegistry",
    "TypeRegistry",
    "normalize_decision",
    "InvalidDecisionError",
    "RegistrySealedError",
    # Resolver
    "Resolver",
    "resolve",
    "ResolverConfig",
    "ResolutionTrace",
    "VariantMismatchError",
    # Variant
    "Buildable",
]
