"""variantkit: declarative variant resolution.

Usage:
    from variantkit import Buildable

    class Widget(Buildable): ...
    class AdminWidget(Widget): ...

    @Widget.build
    def admins(user, **options):
        return AdminWidget if user.is_admin else None

    widget_cls = Widget.resolve_variant(user)   # AdminWidget or Widget
    widget = widget_cls(user)

Deciders are tried in registration order and the first match wins. With no
match, the base type itself is returned.
"""

__version__ = "0.1.0"

# Decisions and registries
from variantkit.core import (
    NO_MATCH,
    DeciderRegistry,
    DecisionPolicy,
    InvalidDecisionError,
    Match,
    NoMatch,
    RegistrySealedError,
    TypeRegistry,
    decider,
    get_registry,
)

# Resolution
from variantkit.core import (
    ResolutionTrace,
    Resolver,
    ResolverConfig,
    VariantMismatchError,
    resolve,
)

# Class-level API
from variantkit.core import Buildable

__all__ = [
    # Version
    "__version__",
    # Decisions and registries
    "Match",
    "NoMatch",
    "NO_MATCH",
    "DecisionPolicy",
    "decider",
    "get_registry",
    "DeciderRegistry",
    "TypeRegistry",
    "InvalidDecisionError",
    "RegistrySealedError",
    # Resolution
    "Resolver",
    "resolve",
    "ResolverConfig",
    "ResolutionTrace",
    "VariantMismatchError",
    # Class-level API
    "Buildable",
]
