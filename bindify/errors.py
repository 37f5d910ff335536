"""Module containing errors classes."""

from collections.abc import Sequence
from typing import Any


class BindingMetadataError(Exception):
    """Base class for all binding metadata errors."""

    pass


class InvalidResolutionContextError(BindingMetadataError, ValueError):
    """Raised when the resolution context is missing or of the wrong type."""

    def __init__(self, context: Any) -> None:
        self.context = context
        super().__init__(
            f"A ResolutionContext is required, got {context!r}",
        )


class InvalidResolutionKeyError(BindingMetadataError, ValueError):
    """Raised when a resolution key is inconsistent with its kind."""

    pass


class AmbiguousBindingConstructorError(BindingMetadataError):
    """Raised when more than one constructor is marked with @binding_constructor."""

    def __init__(self, type_: type, constructors: Sequence[Any]) -> None:
        self.type_ = type_
        self.constructors = constructors
        super().__init__(
            f"More than one constructor found on {type_!r} marked with @binding_constructor: "
            f"{', '.join(c.name for c in constructors)}",
        )


class BindingNotAllowedError(BindingMetadataError):
    """Raised when a required parameter is not allowed to be bound."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Parameter {name!r} has no default value but binding is not allowed",
        )


class UnsupportedBindingSourceError(BindingMetadataError):
    """Raised when a binding source cannot be mapped by an integration."""

    def __init__(self, source: Any) -> None:
        self.source = source
        super().__init__(f"Unsupported binding source {source!s}")


class InvalidTypeAnnotation(TypeError):
    """Raised for invalid type annotation."""

    pass


class MissingPropertyTypeAnnotation(InvalidTypeAnnotation):
    """Raised when type annotation for a property is missing."""

    pass


class MissingParameterTypeAnnotation(InvalidTypeAnnotation):
    """Raised when type annotation for a parameter is missing."""

    pass
