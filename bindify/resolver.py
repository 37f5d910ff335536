"""This module contains the binding metadata resolution.

Example:
    from dataclasses import dataclass
    from typing import Annotated

    from bindify.context import ResolutionContext
    from bindify.markers import BindNever, FromRoute
    from bindify.resolver import BindingMetadataResolver

    @dataclass
    class Order:
        id: Annotated[int, FromRoute("order_id")]
        total: Annotated[float, BindNever]

    resolver = BindingMetadataResolver()

    metadata = resolver.resolve(ResolutionContext.for_property(Order, "id"))
    print(metadata.binder_model_name, metadata.binding_source)
    #> order_id Route
    metadata = resolver.resolve(ResolutionContext.for_property(Order, "total"))
    print(metadata.is_binding_allowed)
    #> False
"""

import logging

from bindify.behaviors import NEVER, REQUIRED
from bindify.binding_metadata import BindingMetadata
from bindify.constructor import ClassTypeInspector, ConstructorInfo, TypeInspector
from bindify.context import ResolutionContext
from bindify.errors import (
    AmbiguousBindingConstructorError,
    InvalidResolutionContextError,
)
from bindify.filters import CompositePropertyFilter
from bindify.keys import TYPE
from bindify.metadata import (
    BinderTypeProvider,
    BindingBehaviorProvider,
    BindingSourceProvider,
    ModelNameProvider,
    PropertyFilterProvider,
)
from bindify.settings import ResolverSettings

__all__ = (
    "BindingMetadataResolver",
    "find_binding_behavior",
    "find_bound_constructor",
)

logger = logging.getLogger(__name__)


def find_binding_behavior(
    context: ResolutionContext,
    inspector: TypeInspector,
    inherit: bool = False,
) -> BindingBehaviorProvider | None:
    """Find the binding behavior marker that applies to the element.

    A property falls back to the behavior declared on its container type,
    ignoring the markers of the property type. A parameter has no fallback.
    Types have no binding behavior.

    Args:
        context (ResolutionContext): The resolution context.
        inspector (TypeInspector): Used to read the markers declared on the container type.
        inherit (bool, optional): Include markers declared on the bases of the container type. Defaults to False.

    Returns:
        BindingBehaviorProvider | None: The marker if found; otherwise None.
    """
    match context.key.kind:
        case "property":
            behavior = context.property_attributes.first(BindingBehaviorProvider)
            if behavior is not None:
                return behavior
            return inspector.get_declared_markers(
                context.key.container_type, inherit=inherit
            ).first(BindingBehaviorProvider)
        case "parameter":
            return context.parameter_attributes.first(BindingBehaviorProvider)
    return None


def find_bound_constructor(
    context: ResolutionContext, inspector: TypeInspector
) -> ConstructorInfo | None:
    """Select the constructor used to create the resolved type.

    In order of priority: the constructor marked with @binding_constructor,
    the parameterless constructor, then the constructor with the most
    parameters. A tie on the most parameters is not resolved.

    Args:
        context (ResolutionContext): The resolution context.
        inspector (TypeInspector): Used to list the constructors of the type.

    Raises:
        AmbiguousBindingConstructorError: If more than one constructor is marked with @binding_constructor.

    Returns:
        ConstructorInfo | None: The constructor if found; otherwise None.
    """
    type_ = context.key.model_type
    if not inspector.is_constructible(type_):
        return None

    constructors = tuple(inspector.get_constructors(type_))
    if not constructors:
        return None

    designated = tuple(c for c in constructors if c.is_designated)
    if len(designated) > 1:
        raise AmbiguousBindingConstructorError(type_, designated)
    elif len(designated) == 1:
        return designated[0]

    for constructor in constructors:
        if constructor.parameter_count == 0:
            return constructor

    ordered = sorted(
        constructors, key=lambda c: c.parameter_count, reverse=True
    )
    if len(ordered) > 1 and (
        ordered[1].parameter_count == ordered[0].parameter_count
    ):
        logger.debug(
            "Multiple constructors of %r with %d parameters, none selected",
            type_,
            ordered[0].parameter_count,
        )
        return None
    return ordered[0]


class BindingMetadataResolver:
    """Resolve the binding metadata of a type, a property or a parameter.

    Markers are read in declaration order and the first one providing a
    capability wins.
    """

    __slots__ = ("_inspector", "_inherit_container_behavior")

    def __init__(
        self,
        inspector: TypeInspector | None = None,
        *,
        inherit_container_behavior: bool = False,
    ) -> None:
        self._inspector = inspector or ClassTypeInspector()
        self._inherit_container_behavior = inherit_container_behavior

    @classmethod
    def from_settings(
        cls,
        settings: ResolverSettings | None = None,
        *,
        env_file: str | None = None,
    ) -> "BindingMetadataResolver":
        """Create a resolver configured by ResolverSettings.

        Args:
            settings (ResolverSettings | None, optional): The settings. Loaded from the environment if None.
            env_file (str | None, optional): Dotenv file to load the settings from. Defaults to None.

        Returns:
            BindingMetadataResolver: The resolver.
        """
        if settings is None:
            settings = ResolverSettings(_env_file=env_file)  # type: ignore[call-arg]
        return cls(
            ClassTypeInspector(
                discover_factory_constructors=settings.discover_factory_constructors
            ),
            inherit_container_behavior=settings.inherit_container_behavior,
        )

    @property
    def inspector(self) -> TypeInspector:
        return self._inspector

    def resolve(self, context: ResolutionContext) -> BindingMetadata:
        """Resolve the binding metadata of an element.

        Args:
            context (ResolutionContext): The element and its markers.

        Raises:
            InvalidResolutionContextError: If context is missing.
            AmbiguousBindingConstructorError: If more than one constructor of the type is marked with @binding_constructor.

        Returns:
            BindingMetadata: The resolved metadata.
        """
        if not isinstance(context, ResolutionContext):
            raise InvalidResolutionContextError(context)

        attributes = context.attributes

        binder_model_name = None
        for name_provider in attributes.of_type(ModelNameProvider):
            if name_provider.name:
                binder_model_name = name_provider.name
                break

        binder_type = None
        for binder_type_provider in attributes.of_type(BinderTypeProvider):
            if binder_type_provider.binder_type is not None:
                binder_type = binder_type_provider.binder_type
                break

        binding_source = None
        for source_provider in attributes.of_type(BindingSourceProvider):
            if source_provider.binding_source is not None:
                binding_source = source_provider.binding_source
                break

        filter_providers = attributes.of_type(PropertyFilterProvider)
        property_filter_provider: PropertyFilterProvider | None
        if not filter_providers:
            property_filter_provider = None
        elif len(filter_providers) == 1:
            property_filter_provider = filter_providers[0]
        else:
            property_filter_provider = CompositePropertyFilter(
                filter_providers
            )

        is_binding_allowed = True
        is_binding_required = False
        behavior = find_binding_behavior(
            context,
            self._inspector,
            inherit=self._inherit_container_behavior,
        )
        if behavior is not None:
            is_binding_allowed = behavior.behavior != NEVER
            is_binding_required = behavior.behavior == REQUIRED

        bound_constructor = None
        if context.key.kind == TYPE:
            bound_constructor = find_bound_constructor(context, self._inspector)

        metadata = BindingMetadata(
            binder_model_name=binder_model_name,
            binder_type=binder_type,
            binding_source=binding_source,
            property_filter_provider=property_filter_provider,
            is_binding_allowed=is_binding_allowed,
            is_binding_required=is_binding_required,
            bound_constructor=bound_constructor,
        )
        logger.debug("Resolved binding metadata for %s: %r", context.key, metadata)
        return metadata
