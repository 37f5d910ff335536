"""This module contains the result of a binding metadata resolution."""

from dataclasses import dataclass

from bindify.constructor import ConstructorInfo
from bindify.metadata.providers import PropertyFilterProvider
from bindify.sources import BindingSource

__all__ = ("BindingMetadata",)


@dataclass(frozen=True)
class BindingMetadata:
    """Rules governing how a request payload is bound to an element.

    Attributes:
        binder_model_name (str | None): Name to bind from instead of the element name.
        binder_type (type | None): Binder type to use instead of the default one.
        binding_source (BindingSource | None): Where to read the value from.
        property_filter_provider (PropertyFilterProvider | None): Decides which sub-properties are bound.
        is_binding_allowed (bool): Whether the element is bound at all.
        is_binding_required (bool): Whether a value must be present.
        bound_constructor (ConstructorInfo | None): Constructor used to create the element.
    """

    binder_model_name: str | None = None
    binder_type: type | None = None
    binding_source: BindingSource | None = None
    property_filter_provider: PropertyFilterProvider | None = None
    is_binding_allowed: bool = True
    is_binding_required: bool = False
    bound_constructor: ConstructorInfo | None = None

    def __post_init__(self) -> None:
        if self.is_binding_required and not self.is_binding_allowed:
            raise ValueError(
                "Binding cannot be required when it is not allowed."
            )
