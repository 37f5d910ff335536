"""This module contains the identity of the element being resolved."""

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from bindify._helper import resolve_type_name
from bindify.errors import InvalidResolutionKeyError

__all__ = (
    "MetadataKind",
    "TYPE",
    "PROPERTY",
    "PARAMETER",
    "ResolutionKey",
)

MetadataKind: TypeAlias = Literal["type", "property", "parameter"]
TYPE: MetadataKind = "type"
PROPERTY: MetadataKind = "property"
PARAMETER: MetadataKind = "parameter"

METADATA_KINDS = {TYPE, PROPERTY, PARAMETER}


@dataclass(frozen=True, slots=True)
class ResolutionKey:
    """Identifies a type, a property or a parameter to resolve binding metadata for."""

    kind: MetadataKind
    model_type: Any
    container_type: type | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in METADATA_KINDS:
            raise InvalidResolutionKeyError(
                f"Invalid metadata kind {self.kind!r}"
            )
        if self.kind == PROPERTY:
            if self.container_type is None:
                raise InvalidResolutionKeyError(
                    f"Property {self.name!r} is missing a container type."
                )
            if not self.name:
                raise InvalidResolutionKeyError(
                    "Property key is missing a name."
                )
        elif self.container_type is not None:
            raise InvalidResolutionKeyError(
                f"Only property keys have a container type, got {self.kind!r} key with {self.container_type!r}."
            )

    @classmethod
    def for_type(cls, model_type: Any) -> "ResolutionKey":
        return cls(TYPE, model_type)

    @classmethod
    def for_property(
        cls, model_type: Any, name: str, container_type: type
    ) -> "ResolutionKey":
        return cls(PROPERTY, model_type, container_type, name)

    @classmethod
    def for_parameter(cls, model_type: Any, name: str) -> "ResolutionKey":
        return cls(PARAMETER, model_type, None, name)

    def __str__(self) -> str:
        type_name = (
            resolve_type_name(self.model_type)
            if isinstance(self.model_type, type)
            else repr(self.model_type)
        )
        if self.kind == PROPERTY:
            return f"{resolve_type_name(self.container_type)}.{self.name}: {type_name}"
        if self.kind == PARAMETER:
            return f"parameter {self.name}: {type_name}"
        return f"type {type_name}"
