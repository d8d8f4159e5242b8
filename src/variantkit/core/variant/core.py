"""Buildable mixin: class-level deciders.

Usage:
    class UserInfoBox(Buildable):
        ...

    class AuthorizedUserBox(UserInfoBox): ...
    class AdminUserBox(UserInfoBox): ...

    @UserInfoBox.build
    def admins(user, **options):
        return AdminUserBox if user.is_admin else None

    @UserInfoBox.build
    def signed_in(user, **options):
        return AuthorizedUserBox if options.get("signed_in") else None

    box_cls = UserInfoBox.resolve_variant(user, signed_in=True)
    box = box_cls(user)

Multiple build deciders are ORed in definition order; if none matches, the
class itself is used. Subclasses start with an empty registry. Pass
`inherit_deciders=True` in the class statement to start from a copy of the
parents' deciders instead:

    class StaffBox(UserInfoBox, inherit_deciders=True): ...
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from variantkit.core.decider import Decider, DeciderRegistry, get_registry
from variantkit.core.resolver import ResolutionTrace, Resolver, ResolverConfig


class Buildable:
    """Mixin giving a class its own ordered set of variant deciders."""

    __slots__ = ()

    resolver_config: ClassVar[ResolverConfig | None] = None
    """Resolver configuration for resolve_variant(). None uses defaults."""

    def __init_subclass__(cls, inherit_deciders: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        registry = get_registry().registry_for(cls)
        if inherit_deciders:
            for parent in cls.__bases__:
                if isinstance(parent, type) and issubclass(parent, Buildable):
                    for fn in parent.builders():
                        registry.add_decider(fn)

    @classmethod
    def decider_registry(cls) -> DeciderRegistry:
        """The registry owned by this exact class."""
        return get_registry().registry_for(cls)

    @classmethod
    def build[F: Decider](cls, fn: F) -> F:
        """Add a decider to this class. Usable as a decorator.

        Args:
            fn: Callable receiving the resolution arguments and returning a
                Match, NO_MATCH, a class, or None.

        Returns:
            fn, unchanged.
        """
        cls.decider_registry().add_decider(fn)
        return fn

    @classmethod
    def builders(cls) -> tuple[Decider, ...]:
        """Deciders of this class in registration order."""
        return cls.decider_registry().deciders()

    @classmethod
    def seal_deciders(cls) -> None:
        cls.decider_registry().seal()

    @classmethod
    def _resolver(cls) -> Resolver:
        return Resolver(cls.decider_registry(), cls.resolver_config)

    @classmethod
    def resolve_variant(cls, *args: Any, **kwargs: Any) -> type[Self]:
        """Pick the class to instantiate for these arguments.

        Returns:
            The first matching decider's class, or cls if none matches.
        """
        trace = cls._resolver()._scan(args, kwargs, stacklevel=2)
        return trace.resolved  # type: ignore[return-value]

    @classmethod
    def explain_variant(cls, *args: Any, **kwargs: Any) -> ResolutionTrace:
        """Like resolve_variant(), but return the full resolution trace."""
        return cls._resolver()._scan(args, kwargs, stacklevel=2)
