"""Resolution of a base type to its variant.

Usage:
    resolver = Resolver(get_registry().registry_for(UserBox))
    box_cls = resolver.resolve(user, signed_in=True)

    # Or through the global registry
    box_cls = resolve(UserBox, user, signed_in=True)

Deciders are evaluated in registration order and the first match wins; later
deciders are not invoked. If none match, the base type is returned. An
exception raised by a decider propagates to the caller as is.
"""

from __future__ import annotations

import logging
from typing import Any

from variantkit.core.decider import (
    DeciderRegistry,
    Match,
    decider_name,
    get_registry,
    normalize_decision,
)
from variantkit.core.resolver.models import (
    ResolutionTrace,
    ResolverConfig,
    VariantMismatchError,
)

logger = logging.getLogger(__name__)


class Resolver:
    """Evaluates one registry against call arguments.

    Holds no state besides the registry reference and config, so one instance
    can serve any number of resolutions.
    """

    __slots__ = ("_registry", "_config")

    def __init__(self, registry: DeciderRegistry, config: ResolverConfig | None = None) -> None:
        self._registry = registry
        self._config = config or ResolverConfig()

    @property
    def registry(self) -> DeciderRegistry:
        return self._registry

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(self, *args: Any, **kwargs: Any) -> type:
        """Return the type to instantiate for these arguments.

        Args:
            *args: Positional arguments passed to every decider invoked.
            **kwargs: Keyword arguments passed to every decider invoked.

        Returns:
            The first matched variant, or the base type if nothing matched.

        Raises:
            InvalidDecisionError: If a decider returns a malformed value (strict policy).
            VariantMismatchError: If check_variant is set and the match is not a subclass.
        """
        return self._scan(args, kwargs, stacklevel=2).resolved

    def explain(self, *args: Any, **kwargs: Any) -> ResolutionTrace:
        """Resolve and report which decider decided.

        Same semantics as resolve(), including exception propagation.
        """
        return self._scan(args, kwargs, stacklevel=2)

    def _scan(
        self, args: tuple[Any, ...], kwargs: dict[str, Any], stacklevel: int
    ) -> ResolutionTrace:
        # stacklevel counts from the caller of _scan, as in warnings.warn
        config = self._config
        base = self._registry.base
        if config.seal_on_resolve:
            self._registry.seal()

        # Snapshot so registration during the scan cannot change its outcome
        deciders = self._registry.deciders()

        for index, fn in enumerate(deciders):
            decision = normalize_decision(
                fn, fn(*args, **kwargs), config.decision_policy, stacklevel=stacklevel + 1
            )
            if isinstance(decision, Match):
                variant = decision.variant
                name = decider_name(fn)
                if config.check_variant and not issubclass(variant, base):
                    raise VariantMismatchError(
                        f"Decider {name} chose {variant.__qualname__}, "
                        f"which is not a subclass of {base.__qualname__}"
                    )
                logger.debug(
                    "Resolved %s to %s via decider %s (position %d)",
                    base.__qualname__,
                    variant.__qualname__,
                    name,
                    index,
                )
                return ResolutionTrace(
                    base=base,
                    resolved=variant,
                    matched_index=index,
                    matched_decider=name,
                    evaluated=index + 1,
                )

        logger.debug(
            "No decider matched for %s (%d evaluated); using base type",
            base.__qualname__,
            len(deciders),
        )
        return ResolutionTrace(
            base=base,
            resolved=base,
            matched_index=None,
            matched_decider=None,
            evaluated=len(deciders),
        )


def resolve(base: type, *args: Any, config: ResolverConfig | None = None, **kwargs: Any) -> type:
    """Resolve base against its registry in the global type registry.

    A type with no registered deciders resolves to itself; with seal_on_resolve
    its (empty) registry is created and sealed. The keyword `config`
    is reserved for the resolver and is not passed to deciders.

    Args:
        base: Base type to resolve.
        *args: Positional arguments for the deciders.
        config: Optional resolver configuration.
        **kwargs: Keyword arguments for the deciders.

    Returns:
        The resolved type.
    """
    if config is not None and config.seal_on_resolve:
        registry = get_registry().registry_for(base)
    else:
        registry = get_registry().get(base)
        if registry is None:
            return base
    return Resolver(registry, config)._scan(args, kwargs, stacklevel=2).resolved
