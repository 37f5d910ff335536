"""This module contains the constructor introspection used for binding.

The resolver never inspects classes directly. It goes through a
TypeInspector, so the constructor selection can be exercised with any
synthetic list of constructors.
"""

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from types import NoneType
from typing import Any, Protocol, Self, TypeVar

from bindify._helper import resolve_type_name
from bindify._markers import MARKERS_ATTR
from bindify.metadata import MetadataSequence

__all__ = (
    "ConstructorInfo",
    "TypeInspector",
    "ClassTypeInspector",
    "binding_constructor",
    "is_binding_constructor",
)

BINDING_CONSTRUCTOR_ATTR = "__binding_constructor__"

VALUE_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Enum,
    NoneType,
)

F = TypeVar("F")


@dataclass(frozen=True)
class ConstructorInfo:
    """A public constructor of a type."""

    name: str
    function: Callable[..., Any]
    parameters: tuple[str, ...]
    is_designated: bool = False

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)

    def __repr__(self) -> str:
        return f"Constructor({self.name}({', '.join(self.parameters)}))"


def binding_constructor(f: F) -> F:
    """Marks a constructor as the one to use when binding its type.

    Can be applied to __init__ or to a classmethod returning the class.

    Example:
        class Point:
            def __init__(self, x: int, y: int) -> None:
                ...

            @classmethod
            @binding_constructor
            def from_pair(cls, pair: str) -> "Point":
                ...
    """
    target = f.__func__ if isinstance(f, classmethod) else f
    setattr(target, BINDING_CONSTRUCTOR_ATTR, True)
    return f


def is_binding_constructor(f: Any) -> bool:
    target = f.__func__ if isinstance(f, classmethod) else f
    return bool(getattr(target, BINDING_CONSTRUCTOR_ATTR, False))


class TypeInspector(Protocol):
    def is_constructible(self, type_: Any) -> bool:
        raise NotImplementedError()

    def get_constructors(self, type_: type) -> Sequence[ConstructorInfo]:
        raise NotImplementedError()

    def get_declared_markers(
        self, type_: Any, inherit: bool = False
    ) -> MetadataSequence:
        raise NotImplementedError()


def _parameter_names(
    signature: inspect.Signature, skip_first: bool
) -> tuple[str, ...]:
    parameters = list(signature.parameters.values())
    if skip_first:
        parameters = parameters[1:]
    return tuple(
        parameter.name
        for parameter in parameters
        if parameter.kind
        not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    )


def _returns_type(function: Callable[..., Any], type_: type) -> bool:
    annotation = getattr(function, "__annotations__", {}).get("return")
    return (
        annotation is type_
        or annotation is Self
        or annotation in (type_.__name__, type_.__qualname__, "Self")
    )


class ClassTypeInspector(TypeInspector):
    """Inspects real Python classes.

    The constructors of a class are its __init__ (or its __new__ when
    __init__ is inherited from object), followed by its public
    classmethods returning the class itself (alternate constructors).
    """

    __slots__ = ("_discover_factory_constructors",)

    def __init__(self, discover_factory_constructors: bool = True) -> None:
        self._discover_factory_constructors = discover_factory_constructors

    def is_constructible(self, type_: Any) -> bool:
        if not isinstance(type_, type):
            return False
        if inspect.isabstract(type_):
            return False
        if getattr(type_, "_is_protocol", False):
            return False
        return not issubclass(type_, VALUE_TYPES)

    def _get_init_constructor(self, type_: type) -> ConstructorInfo:
        init = type_.__init__  # type: ignore[misc]
        if init is object.__init__:
            # Classes such as NamedTuple take their arguments in __new__.
            new = type_.__new__
            if new is object.__new__:
                return ConstructorInfo(
                    f"{resolve_type_name(type_)}.__init__", type_, ()
                )
            return ConstructorInfo(
                f"{resolve_type_name(type_)}.__new__",
                type_,
                _parameter_names(inspect.signature(new), skip_first=True),
                is_designated=is_binding_constructor(new),
            )
        return ConstructorInfo(
            f"{resolve_type_name(type_)}.__init__",
            type_,
            _parameter_names(inspect.signature(init), skip_first=True),
            is_designated=is_binding_constructor(init),
        )

    def _iter_classmethods(self, type_: type):
        seen: set[str] = set()
        for base in type_.__mro__:
            if base is object:
                continue
            for attr_name, value in vars(base).items():
                if attr_name in seen:
                    continue
                seen.add(attr_name)
                if isinstance(value, classmethod):
                    yield attr_name, value

    def get_constructors(self, type_: type) -> Sequence[ConstructorInfo]:
        constructors = [self._get_init_constructor(type_)]
        for attr_name, value in self._iter_classmethods(type_):
            designated = is_binding_constructor(value)
            if not designated:
                if attr_name.startswith("_"):
                    continue
                if not self._discover_factory_constructors:
                    continue
                if not _returns_type(value.__func__, type_):
                    continue
            function = getattr(type_, attr_name)
            constructors.append(
                ConstructorInfo(
                    f"{resolve_type_name(type_)}.{attr_name}",
                    function,
                    _parameter_names(inspect.signature(function), skip_first=False),
                    is_designated=designated,
                )
            )
        return tuple(constructors)

    def get_declared_markers(
        self, type_: Any, inherit: bool = False
    ) -> MetadataSequence:
        if not isinstance(type_, type):
            return MetadataSequence()
        if not inherit:
            return MetadataSequence(type_.__dict__.get(MARKERS_ATTR, ()))
        return MetadataSequence(
            marker
            for base in type_.__mro__
            for marker in base.__dict__.get(MARKERS_ATTR, ())
        )
