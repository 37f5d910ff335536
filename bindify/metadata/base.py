from collections.abc import Iterable
from functools import partial
from typing import Any, TypeVar, cast

__all__ = (
    "BaseMetadata",
    "MetadataSequence",
    "collect_metadata",
)


class BaseMetadata:
    __slots__ = ()


T = TypeVar("T")


class MetadataSequence(tuple[Any, ...]):
    """An ordered tuple of markers.

    Unlike a set, declaration order is preserved since the first matching
    marker wins during resolution.
    """

    def of_type(self, key: type[T]) -> tuple[T, ...]:
        return tuple(
            cast(T, metadata) for metadata in self if isinstance(metadata, key)
        )

    def first(self, key: type[T], default: T | None = None) -> T | None:
        for metadata in self:
            if isinstance(metadata, key):
                return cast(T, metadata)
        return default

    def __add__(self, other: Iterable[Any]) -> "MetadataSequence":  # type: ignore[override]
        return MetadataSequence((*self, *other))

    def __repr__(self) -> str:
        return f"MetadataSequence({', '.join(repr(m) for m in self)})"


EMPTY = MetadataSequence()


def _is_instance(type_: type, instance: Any) -> bool:
    return isinstance(instance, type_)


def _collect_metadata(
    type_: Any,
    metadata_type: type,
) -> MetadataSequence:
    vals: tuple[Any, ...] = getattr(type_, "__metadata__", tuple())
    if not vals:
        return EMPTY
    return MetadataSequence(filter(partial(_is_instance, metadata_type), vals))


def collect_metadata(type_: Any) -> MetadataSequence:
    """Collect all annotated metadata that inherits BaseMetadata class in declaration order."""
    return _collect_metadata(type_, BaseMetadata)
