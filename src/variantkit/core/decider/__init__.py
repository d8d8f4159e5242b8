"""Decider functionality: decisions, registries, and the @decider decorator."""

from variantkit.core.decider.core import (
    DeciderRegistry,
    TypeRegistry,
    decider,
    get_registry,
    normalize_decision,
)
from variantkit.core.decider.models import (
    NO_MATCH,
    Decider,
    DeciderReturn,
    Decision,
    DecisionPolicy,
    InvalidDecisionError,
    Match,
    NoMatch,
    RegistrySealedError,
    decider_name,
)

__all__ = [
    # Models
    "Match",
    "NoMatch",
    "NO_MATCH",
    "Decision",
    "Decider",
    "DeciderReturn",
    "DecisionPolicy",
    "InvalidDecisionError",
    "RegistrySealedError",
    "decider_name",
    # Core
    "decider",
    "get_registry",
    "DeciderRegistry",
    "TypeRegistry",
    "normalize_decision",
]
