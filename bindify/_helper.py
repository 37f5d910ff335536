from collections.abc import Sequence
from dataclasses import dataclass
from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from bindify.errors import InvalidTypeAnnotation


@dataclass(frozen=True)
class TypeInfo:
    inner_type: Any
    metadata: Sequence[Any]

    @property
    def __metadata__(self):
        return self.metadata


def get_type_info(type_annotation: Any) -> TypeInfo:
    inner_type = type_annotation
    metadata: list = []
    while not isinstance(inner_type, type):
        origin = get_origin(inner_type)
        args = get_args(inner_type)
        if origin is UnionType or origin is Union:
            union_types = tuple(filter(lambda x: x is not NoneType, args))
            if len(union_types) > 1:
                raise InvalidTypeAnnotation(
                    f"Union type is not currently supported: {type_annotation!r}"
                )
            inner_type = union_types[0]
        elif origin is Annotated:
            inner_type = args[0]
            metadata.extend(args[1:])
        else:
            if inner_type == origin:
                break
            inner_type = origin
    return TypeInfo(inner_type=inner_type, metadata=tuple(metadata))


def ensure_type_annotation(
    *,
    type_annotation: Any,
    name: str,
    raise_type: type[InvalidTypeAnnotation] = InvalidTypeAnnotation,
) -> TypeInfo:
    if type_annotation is None:
        raise raise_type(f"{name} is missing a type annotation.")
    return get_type_info(type_annotation)


def resolve_type_name(value: Any) -> str:
    """Resolve qualified name of a value."""
    return f"{value.__module__}.{value.__qualname__}".replace(".<locals>", "")
