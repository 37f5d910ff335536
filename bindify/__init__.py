"""Bindify, resolve how request payloads bind to annotated data models."""

__version__ = "0.1.0"


from .binding_metadata import BindingMetadata
from .constructor import ClassTypeInspector, ConstructorInfo, binding_constructor
from .context import ResolutionContext, property_contexts
from .filters import CompositePropertyFilter
from .keys import ResolutionKey
from .markers import annotate
from .resolver import BindingMetadataResolver
from .settings import ResolverSettings

__all__ = [
    "BindingMetadata",
    "BindingMetadataResolver",
    "ClassTypeInspector",
    "CompositePropertyFilter",
    "ConstructorInfo",
    "ResolutionContext",
    "ResolutionKey",
    "ResolverSettings",
    "annotate",
    "binding_constructor",
    "property_contexts",
]
