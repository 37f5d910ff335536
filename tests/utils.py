from collections.abc import Iterable, Sequence
from typing import Any

from bindify.constructor import ConstructorInfo, TypeInspector
from bindify.context import ResolutionContext
from bindify.keys import ResolutionKey
from bindify.metadata import MetadataSequence


def _noop(*args, **kwargs) -> None:
    return None


def constructor(
    name: str, parameter_count: int, designated: bool = False
) -> ConstructorInfo:
    return ConstructorInfo(
        name,
        _noop,
        tuple(f"arg{i}" for i in range(parameter_count)),
        is_designated=designated,
    )


class StaticTypeInspector(TypeInspector):
    """A TypeInspector returning predefined constructors and markers."""

    def __init__(
        self,
        constructors: dict[Any, Sequence[ConstructorInfo]] | None = None,
        markers: dict[Any, Sequence[Any]] | None = None,
        inherited_markers: dict[Any, Sequence[Any]] | None = None,
        non_constructible: Iterable[Any] = (),
    ) -> None:
        self._constructors = constructors or {}
        self._markers = markers or {}
        self._inherited_markers = inherited_markers or {}
        self._non_constructible = set(non_constructible)

    def is_constructible(self, type_: Any) -> bool:
        return type_ not in self._non_constructible

    def get_constructors(self, type_: type) -> Sequence[ConstructorInfo]:
        return tuple(self._constructors.get(type_, ()))

    def get_declared_markers(
        self, type_: Any, inherit: bool = False
    ) -> MetadataSequence:
        markers = tuple(self._markers.get(type_, ()))
        if inherit:
            markers = markers + tuple(self._inherited_markers.get(type_, ()))
        return MetadataSequence(markers)


def type_context(model_type: Any, *attributes: Any) -> ResolutionContext:
    return ResolutionContext(
        ResolutionKey.for_type(model_type), attributes=attributes
    )


def property_context(
    container_type: type,
    name: str,
    *attributes: Any,
    model_type: Any = str,
) -> ResolutionContext:
    return ResolutionContext(
        ResolutionKey.for_property(model_type, name, container_type),
        attributes=attributes,
        property_attributes=attributes,
    )


def parameter_context(
    name: str, *attributes: Any, model_type: Any = str
) -> ResolutionContext:
    return ResolutionContext(
        ResolutionKey.for_parameter(model_type, name),
        attributes=attributes,
        parameter_attributes=attributes,
    )
