"""Decider models: decisions, policies, and registry errors.

A decider returns a Decision: either Match(variant) or the NO_MATCH marker.
Returning a bare class or None is accepted as shorthand for the two.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Final


@dataclass(slots=True, frozen=True)
class Match:
    """Decision naming the variant type to use."""

    variant: type

    def __post_init__(self) -> None:
        if not isinstance(self.variant, type):
            raise TypeError(f"Match expects a class, got {self.variant!r}")


class NoMatch:
    """Decision marker: this decider does not apply. Use the NO_MATCH singleton."""

    __slots__ = ()
    _instance: NoMatch | None = None

    def __new__(cls) -> NoMatch:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __reduce__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final = NoMatch()

Decision = Match | NoMatch

DeciderReturn = Match | NoMatch | type | None
"""What a decider may return: a Decision, or the class/None shorthand."""

Decider = Callable[..., DeciderReturn]
"""Signature: (*args, **kwargs) -> Match | NO_MATCH | type | None"""


class DecisionPolicy(Enum):
    """How a resolver treats a decider return value that is not a valid decision."""

    STRICT = auto()  # Raise InvalidDecisionError
    LENIENT = auto()  # Warn and treat as NO_MATCH


def decider_name(fn: Any) -> str:
    """Name used for a decider in messages, logs and traces."""
    return getattr(fn, "__qualname__", None) or repr(fn)


class RegistrySealedError(RuntimeError):
    """Raised when a decider is added to a sealed registry."""

    pass


class InvalidDecisionError(TypeError):
    """Raised when a decider returns something other than a decision (strict policy)."""

    def __init__(self, decider: Any, value: Any) -> None:
        self.decider = decider
        self.value = value
        super().__init__(
            f"Decider {decider_name(decider)} returned {value!r}: "
            "expected Match, NO_MATCH, a class, or None"
        )
