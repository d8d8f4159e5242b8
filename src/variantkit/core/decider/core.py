"""Decider registries, the @decider decorator, and decision normalization.

Usage:
    class UserBox: ...
    class AdminUserBox(UserBox): ...

    @decider(UserBox)
    def admins(user, **options):
        return Match(AdminUserBox) if user.is_admin else NO_MATCH

    # Shorthand: return the class, or None for "not me"
    @decider(UserBox)
    def signed_in(user, **options):
        return AuthorizedUserBox if options.get("signed_in") else None
"""

from __future__ import annotations

import itertools
import logging
import warnings
import weakref
from collections.abc import Callable, Iterator

from variantkit.core.decider.models import (
    NO_MATCH,
    Decider,
    Decision,
    DecisionPolicy,
    InvalidDecisionError,
    Match,
    NoMatch,
    RegistrySealedError,
    decider_name,
)

logger = logging.getLogger(__name__)


class DeciderRegistry:
    """Ordered deciders for one base type.

    Insertion order is the only tie-break between deciders; the sequence is
    never reordered or deduplicated. Registries are populated during setup and
    can be sealed to make them read-only before concurrent resolution starts.
    """

    __slots__ = ("_base", "_deciders", "_sealed")

    def __init__(self, base: type) -> None:
        """Initialize an empty registry owned by base."""
        if not isinstance(base, type):
            raise TypeError(f"Registry owner must be a class, got {base!r}")
        self._base = base
        self._deciders: list[Decider] = []
        self._sealed = False

    @property
    def base(self) -> type:
        """The owning type, returned when no decider matches."""
        return self._base

    @property
    def sealed(self) -> bool:
        return self._sealed

    def add_decider(self, fn: Decider) -> None:
        """Append a decider to the end of the sequence.

        Registering the same function twice evaluates it twice.

        Args:
            fn: Callable invoked with the resolution arguments.

        Raises:
            TypeError: If fn is not callable.
            RegistrySealedError: If the registry has been sealed.
        """
        if not callable(fn):
            raise TypeError(f"Decider must be callable, got {fn!r}")
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot add decider {decider_name(fn)}: "
                f"registry for {self._base.__qualname__} is sealed"
            )
        self._deciders.append(fn)
        logger.debug(
            "Registered decider %s on %s (position %d)",
            decider_name(fn),
            self._base.__qualname__,
            len(self._deciders) - 1,
        )

    def deciders(self) -> tuple[Decider, ...]:
        """Snapshot of the deciders in registration order."""
        return tuple(self._deciders)

    def seal(self) -> None:
        """Reject any further registration. Idempotent."""
        if not self._sealed:
            self._sealed = True
            logger.debug(
                "Sealed decider registry for %s with %d decider(s)",
                self._base.__qualname__,
                len(self._deciders),
            )

    def __len__(self) -> int:
        return len(self._deciders)

    def __iter__(self) -> Iterator[Decider]:
        return iter(self.deciders())

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"DeciderRegistry({self._base.__qualname__}, deciders={len(self)}, {state})"


# Distinct attribute per TypeRegistry so private registries never collide
_attribute_ids = itertools.count()


class TypeRegistry:
    """Process-local index of base types and their decider registries.

    Each type owns an independent registry, stored in the class's own
    __dict__ so it lives and dies with the class. The index itself only holds
    weak references, so classes created in factories or functions can still
    be garbage-collected. A subclass never sees its parent's deciders unless
    they are copied into it explicitly.
    """

    def __init__(self) -> None:
        """Initialize empty type registry."""
        self._attribute = f"__variant_deciders_{next(_attribute_ids)}__"
        self._types: weakref.WeakSet[type] = weakref.WeakSet()
        # Builtin and extension types reject attributes and are never collected
        self._immutable: dict[type, DeciderRegistry] = {}

    def registry_for(self, cls: type) -> DeciderRegistry:
        """Get the registry for cls, creating an empty one on first use.

        Args:
            cls: Base type owning the registry.

        Returns:
            The DeciderRegistry attached to cls.
        """
        registry = self.get(cls)
        if registry is None:
            registry = DeciderRegistry(cls)
            try:
                setattr(cls, self._attribute, registry)
            except TypeError:
                self._immutable[cls] = registry
            self._types.add(cls)
        return registry

    def get(self, cls: type) -> DeciderRegistry | None:
        """Get the registry for cls if one was created, None otherwise."""
        # vars(), not getattr(): a subclass must not pick up its parent's registry
        registry = vars(cls).get(self._attribute)
        if registry is None:
            registry = self._immutable.get(cls)
        return registry

    def is_registered(self, cls: type) -> bool:
        return self.get(cls) is not None

    def seal_all(self) -> None:
        """Seal every registry whose type is still alive."""
        for cls in list(self._types):
            registry = self.get(cls)
            if registry is not None:
                registry.seal()

    def __len__(self) -> int:
        return len(self._types)


# Module-level registry instance
_registry = TypeRegistry()


def get_registry() -> TypeRegistry:
    """Access the global type registry.

    Returns:
        The process-local TypeRegistry instance.
    """
    return _registry


def decider[F: Callable[..., object]](base: type) -> Callable[[F], F]:
    """Register the decorated function as a decider for base.

    The function is returned unchanged so it can still be called directly.

    Args:
        base: Type whose resolution the decider takes part in.

    Returns:
        Decorator that registers the function.
    """

    def decorator(fn: F) -> F:
        _registry.registry_for(base).add_decider(fn)
        return fn

    return decorator


def normalize_decision(
    fn: Decider,
    value: object,
    policy: DecisionPolicy = DecisionPolicy.STRICT,
    stacklevel: int = 1,
) -> Decision:
    """Convert a decider return value to a Decision.

    Accepts Match, NO_MATCH, a bare class (as Match) and None (as NO_MATCH).
    Anything else is malformed: truthiness is never used to decide.

    Args:
        fn: The decider that produced value, for error messages.
        value: Raw return value.
        policy: Treatment of malformed values.
        stacklevel: Frame the lenient-policy warning is attributed to, counted
            from the caller of this function (1 = the caller itself).

    Returns:
        Match or NO_MATCH.

    Raises:
        InvalidDecisionError: If value is malformed and policy is STRICT.
    """
    if isinstance(value, Match | NoMatch):
        return value
    if value is None:
        return NO_MATCH
    if isinstance(value, type):
        return Match(value)

    if policy == DecisionPolicy.LENIENT:
        warnings.warn(
            f"Decider {decider_name(fn)} returned {value!r}; treating it as no match.",
            stacklevel=stacklevel + 1,
        )
        return NO_MATCH
    raise InvalidDecisionError(fn, value)
