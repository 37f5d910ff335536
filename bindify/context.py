"""This module contains the input of a binding metadata resolution."""

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, get_type_hints

from bindify._helper import ensure_type_annotation, resolve_type_name
from bindify.constructor import ClassTypeInspector, TypeInspector
from bindify.errors import (
    MissingParameterTypeAnnotation,
    MissingPropertyTypeAnnotation,
)
from bindify.keys import ResolutionKey
from bindify.metadata import MetadataSequence, collect_metadata

__all__ = (
    "ResolutionContext",
    "property_contexts",
)

_DEFAULT_INSPECTOR = ClassTypeInspector()


def _as_sequence(markers: Iterable[Any]) -> MetadataSequence:
    if isinstance(markers, MetadataSequence):
        return markers
    return MetadataSequence(markers)


@dataclass(frozen=True)
class ResolutionContext:
    """Markers attached to the element identified by key.

    Attributes:
        key (ResolutionKey): The element being resolved.
        attributes (MetadataSequence): All markers of the element, in priority order.
        property_attributes (MetadataSequence): Markers declared on the property only.
        parameter_attributes (MetadataSequence): Markers declared on the parameter only.
    """

    key: ResolutionKey
    attributes: MetadataSequence = field(default_factory=MetadataSequence)
    property_attributes: MetadataSequence = field(
        default_factory=MetadataSequence
    )
    parameter_attributes: MetadataSequence = field(
        default_factory=MetadataSequence
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _as_sequence(self.attributes))
        object.__setattr__(
            self, "property_attributes", _as_sequence(self.property_attributes)
        )
        object.__setattr__(
            self,
            "parameter_attributes",
            _as_sequence(self.parameter_attributes),
        )

    @classmethod
    def for_type(
        cls, type_: Any, inspector: TypeInspector | None = None
    ) -> "ResolutionContext":
        """Create a context for a type using the markers declared on it.

        Args:
            type_ (Any): The type to resolve. May be an Annotated type.
            inspector (TypeInspector | None, optional): Used to read markers declared on the type. Defaults to None.

        Returns:
            ResolutionContext: The context.
        """
        inspector = inspector or _DEFAULT_INSPECTOR
        type_info = ensure_type_annotation(type_annotation=type_, name="type")
        return cls(
            ResolutionKey.for_type(type_info.inner_type),
            attributes=collect_metadata(type_info)
            + inspector.get_declared_markers(type_info.inner_type, inherit=True),
        )

    @classmethod
    def for_property(
        cls,
        container_type: type,
        name: str,
        inspector: TypeInspector | None = None,
    ) -> "ResolutionContext":
        """Create a context for an annotated property of a class.

        Args:
            container_type (type): The class declaring the property.
            name (str): The property name.
            inspector (TypeInspector | None, optional): Used to read markers declared on the property type. Defaults to None.

        Raises:
            MissingPropertyTypeAnnotation: If the property has no type annotation.

        Returns:
            ResolutionContext: The context.
        """
        inspector = inspector or _DEFAULT_INSPECTOR
        type_hints = get_type_hints(container_type, include_extras=True)
        type_info = ensure_type_annotation(
            type_annotation=type_hints.get(name),
            name=f"{resolve_type_name(container_type)}.{name}",
            raise_type=MissingPropertyTypeAnnotation,
        )
        property_attributes = collect_metadata(type_info)
        return cls(
            ResolutionKey.for_property(
                type_info.inner_type, name, container_type
            ),
            attributes=property_attributes
            + inspector.get_declared_markers(type_info.inner_type, inherit=True),
            property_attributes=property_attributes,
        )

    @classmethod
    def for_parameter(
        cls,
        function: Callable[..., Any],
        name: str,
        inspector: TypeInspector | None = None,
    ) -> "ResolutionContext":
        """Create a context for an annotated parameter of a callable.

        For classes, the parameters of __init__ are used.

        Args:
            function (Callable[..., Any]): The callable declaring the parameter.
            name (str): The parameter name.
            inspector (TypeInspector | None, optional): Used to read markers declared on the parameter type. Defaults to None.

        Raises:
            MissingParameterTypeAnnotation: If the parameter has no type annotation.

        Returns:
            ResolutionContext: The context.
        """
        inspector = inspector or _DEFAULT_INSPECTOR
        func = function.__init__ if inspect.isclass(function) else function  # type: ignore[misc]
        if name not in inspect.signature(func).parameters:
            raise ValueError(
                f"{resolve_type_name(function)} has no parameter {name!r}"
            )
        type_hints = get_type_hints(func, include_extras=True)
        type_info = ensure_type_annotation(
            type_annotation=type_hints.get(name),
            name=f"{resolve_type_name(function)} parameter {name}",
            raise_type=MissingParameterTypeAnnotation,
        )
        parameter_attributes = collect_metadata(type_info)
        return cls(
            ResolutionKey.for_parameter(type_info.inner_type, name),
            attributes=parameter_attributes
            + inspector.get_declared_markers(type_info.inner_type, inherit=True),
            parameter_attributes=parameter_attributes,
        )


def property_contexts(
    container_type: type, inspector: TypeInspector | None = None
) -> tuple[ResolutionContext, ...]:
    """Create a context for every annotated property of a class."""
    type_hints = get_type_hints(container_type, include_extras=True)
    return tuple(
        ResolutionContext.for_property(container_type, name, inspector)
        for name in type_hints
        if not name.startswith("_")
    )
