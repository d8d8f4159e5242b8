"""Variant functionality: the Buildable mixin."""

from variantkit.core.variant.core import Buildable

__all__ = ["Buildable"]
