from .base import BaseMetadata, MetadataSequence, collect_metadata
from .providers import (
    BaseBindingMetadata,
    BinderTypeProvider,
    BindingBehaviorProvider,
    BindingSourceProvider,
    ModelNameProvider,
    PropertyFilter,
    PropertyFilterProvider,
)

__all__ = [
    "BaseMetadata",
    "MetadataSequence",
    "collect_metadata",
    "BaseBindingMetadata",
    "ModelNameProvider",
    "BinderTypeProvider",
    "BindingSourceProvider",
    "PropertyFilter",
    "PropertyFilterProvider",
    "BindingBehaviorProvider",
]
