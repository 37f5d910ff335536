"""Capabilities a binding marker can implement.

A marker opts into a capability by inheriting the matching base class.
A single marker may inherit several of them, e.g. a query marker is both a
ModelNameProvider and a BindingSourceProvider.
"""

from collections.abc import Callable
from typing import TypeAlias

from bindify.behaviors import BindingBehavior
from bindify.keys import ResolutionKey
from bindify.sources import BindingSource

from .base import BaseMetadata

__all__ = (
    "BaseBindingMetadata",
    "ModelNameProvider",
    "BinderTypeProvider",
    "BindingSourceProvider",
    "PropertyFilter",
    "PropertyFilterProvider",
    "BindingBehaviorProvider",
)

PropertyFilter: TypeAlias = Callable[[ResolutionKey], bool]


class BaseBindingMetadata(BaseMetadata):
    """Base class for all binding markers."""

    __slots__ = ()


class ModelNameProvider(BaseBindingMetadata):
    """Provides the name a value is bound from."""

    __slots__ = ()

    name: str | None


class BinderTypeProvider(BaseBindingMetadata):
    """Provides the binder type used to bind a value."""

    __slots__ = ()

    binder_type: type | None


class BindingSourceProvider(BaseBindingMetadata):
    """Provides the source a value is bound from."""

    __slots__ = ()

    binding_source: BindingSource | None


class PropertyFilterProvider(BaseBindingMetadata):
    """Provides a predicate deciding which sub-properties are bound."""

    __slots__ = ()

    @property
    def property_filter(self) -> PropertyFilter | None:
        raise NotImplementedError()


class BindingBehaviorProvider(BaseBindingMetadata):
    """Provides whether a value is bound at all, and if it is required."""

    __slots__ = ()

    behavior: BindingBehavior
