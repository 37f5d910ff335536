from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from bindify.behaviors import (
    NEVER,
    OPTIONAL,
    REQUIRED,
    BindingBehavior,
    is_binding_behavior,
)
from bindify.keys import ResolutionKey
from bindify.metadata.providers import (
    BinderTypeProvider,
    BindingBehaviorProvider,
    BindingSourceProvider,
    ModelNameProvider,
    PropertyFilter,
    PropertyFilterProvider,
)
from bindify.sources import (
    BODY,
    CUSTOM,
    FORM,
    HEADER,
    QUERY,
    ROUTE,
    SERVICES,
    BindingSource,
)

MARKERS_ATTR = "__binding_markers__"

T = TypeVar("T")


class Name(str, ModelNameProvider):
    """Bind the value using a different name."""

    @property
    def name(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"


@dataclass(frozen=True, slots=True)
class FromQuery(ModelNameProvider, BindingSourceProvider):
    """Bind the value from the query string."""

    name: str | None = None

    @property
    def binding_source(self) -> BindingSource:
        return QUERY


@dataclass(frozen=True, slots=True)
class FromRoute(ModelNameProvider, BindingSourceProvider):
    """Bind the value from the route values."""

    name: str | None = None

    @property
    def binding_source(self) -> BindingSource:
        return ROUTE


@dataclass(frozen=True, slots=True)
class FromHeader(ModelNameProvider, BindingSourceProvider):
    """Bind the value from a request header."""

    name: str | None = None

    @property
    def binding_source(self) -> BindingSource:
        return HEADER


@dataclass(frozen=True, slots=True)
class FromForm(ModelNameProvider, BindingSourceProvider):
    """Bind the value from the form data."""

    name: str | None = None

    @property
    def binding_source(self) -> BindingSource:
        return FORM


@dataclass(frozen=True, slots=True)
class FromBody(BindingSourceProvider):
    """Bind the value from the request body."""

    @property
    def binding_source(self) -> BindingSource:
        return BODY


@dataclass(frozen=True, slots=True)
class FromServices(BindingSourceProvider):
    """Provide the value from the application services instead of the request."""

    @property
    def binding_source(self) -> BindingSource:
        return SERVICES


@dataclass(frozen=True, slots=True)
class ModelBinder(ModelNameProvider, BinderTypeProvider, BindingSourceProvider):
    """Bind the value using a specific binder type.

    When a binder type is given without an explicit source, the value is
    considered to come from a CUSTOM source.
    """

    binder_type: type | None = None
    name: str | None = None
    source: BindingSource | None = None

    @property
    def binding_source(self) -> BindingSource | None:
        if self.source is not None:
            return self.source
        if self.binder_type is not None:
            return CUSTOM
        return None


@dataclass(frozen=True, slots=True, init=False)
class Bind(ModelNameProvider, PropertyFilterProvider):
    """Limit binding to the included properties.

    Example:
        @dataclass
        class User:
            name: str
            is_admin: bool

        def create(user: Annotated[User, Bind("name", prefix="user")]) -> None:
            ...
    """

    include: tuple[str, ...]
    prefix: str | None

    def __init__(self, *include: str, prefix: str | None = None) -> None:
        object.__setattr__(self, "include", tuple(include))
        object.__setattr__(self, "prefix", prefix)

    @property
    def name(self) -> str | None:
        return self.prefix

    @property
    def property_filter(self) -> PropertyFilter | None:
        if not self.include:
            return None
        return self._is_included

    def _is_included(self, key: ResolutionKey) -> bool:
        return key.name in self.include


@dataclass(frozen=True, slots=True)
class BindingBehaviorMarker(BindingBehaviorProvider):
    """Set whether a value is bound, and whether it is required."""

    behavior: BindingBehavior

    def __post_init__(self) -> None:
        if not is_binding_behavior(self.behavior):
            raise ValueError(f"Invalid binding behavior {self.behavior!r}")


BindNever = BindingBehaviorMarker(NEVER)
BindOptional = BindingBehaviorMarker(OPTIONAL)
BindRequired = BindingBehaviorMarker(REQUIRED)


def annotate(*markers: Any) -> Callable[[T], T]:
    """Attach binding markers to a class.

    Markers declared on a class apply when the class itself is resolved,
    and binding behavior markers also apply to its properties.

    Args:
        *markers (Any): The markers to attach, in priority order.

    Returns:
        A class decorator returning the input class.
    """

    def decorator(cls: T) -> T:
        existing = cls.__dict__.get(MARKERS_ATTR, ())
        setattr(cls, MARKERS_ATTR, (*markers, *existing))
        return cls

    return decorator
