"""Declare FastAPI endpoint parameters using bindify markers.

Example:
    from typing import Annotated

    from fastapi import FastAPI

    from bindify.fastapi import binding_endpoint
    from bindify.markers import BindRequired, FromHeader, FromQuery

    app = FastAPI()

    @app.get("/search")
    @binding_endpoint
    def search(
        term: Annotated[str, FromQuery("q"), BindRequired],
        agent: Annotated[str | None, FromHeader("user-agent")] = None,
    ) -> list[str]:
        ...
"""

import asyncio
import inspect
from collections.abc import Callable
from functools import wraps
from typing import Annotated, Any, TypeVar, get_args, get_origin, get_type_hints

from fastapi import Body, Form, Header, Path, Query
from fastapi.params import Param
from pydantic.fields import FieldInfo

from bindify.binding_metadata import BindingMetadata
from bindify.context import ResolutionContext
from bindify.errors import BindingNotAllowedError, UnsupportedBindingSourceError
from bindify.metadata import BaseMetadata
from bindify.resolver import BindingMetadataResolver
from bindify.sources import BODY, FORM, HEADER, QUERY, ROUTE

__all__ = ("as_fastapi_param", "binding_endpoint")

F = TypeVar("F", bound=Callable[..., Any])


def as_fastapi_param(metadata: BindingMetadata) -> Param | FieldInfo | None:
    """Create the FastAPI parameter declaration matching the binding metadata.

    The returned declaration has no default value, it is meant to be used in
    Annotated with the default set on the parameter itself.

    Args:
        metadata (BindingMetadata): The resolved binding metadata.

    Raises:
        UnsupportedBindingSourceError: If the request source has no FastAPI counterpart.

    Returns:
        Param | FieldInfo | None: The declaration, or None if binding is not
            allowed or the value does not come from the request.
    """
    if not metadata.is_binding_allowed:
        return None
    source = metadata.binding_source
    if source is None or not source.is_from_request:
        return None
    alias = metadata.binder_model_name
    if source == QUERY:
        return Query(alias=alias)
    if source == ROUTE:
        return Path(alias=alias)
    if source == HEADER:
        return Header(alias=alias)
    if source == BODY:
        return Body(alias=alias)
    if source == FORM:
        return Form(alias=alias)
    raise UnsupportedBindingSourceError(source)


def _has_markers(annotation: Any) -> bool:
    if get_origin(annotation) is not Annotated:
        return False
    return any(isinstance(arg, BaseMetadata) for arg in get_args(annotation)[1:])


def _strip_markers(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    args = get_args(annotation)
    return args[0], tuple(
        arg for arg in args[1:] if not isinstance(arg, BaseMetadata)
    )


def _bind_parameter(
    function: Callable[..., Any],
    parameter: inspect.Parameter,
    annotation: Any,
    resolver: BindingMetadataResolver,
) -> inspect.Parameter | None:
    metadata = resolver.resolve(
        ResolutionContext.for_parameter(
            function, parameter.name, resolver.inspector
        )
    )
    if not metadata.is_binding_allowed:
        if parameter.default is inspect.Parameter.empty:
            raise BindingNotAllowedError(parameter.name)
        return None

    base, extras = _strip_markers(annotation)
    source = metadata.binding_source
    if source is not None and not source.is_from_request:
        # Left to the remaining annotations, such as Depends.
        if extras:
            return parameter.replace(annotation=Annotated[(base, *extras)])
        if parameter.default is inspect.Parameter.empty:
            raise UnsupportedBindingSourceError(source)
        return None

    default = parameter.default
    if metadata.is_binding_required or metadata.binding_source == ROUTE:
        default = inspect.Parameter.empty

    param = as_fastapi_param(metadata)
    if param is not None:
        extras = (*extras, param)
    new_annotation = Annotated[(base, *extras)] if extras else base
    return parameter.replace(annotation=new_annotation, default=default)


def binding_endpoint(
    f: F | None = None, /, *, resolver: BindingMetadataResolver | None = None
):
    """Rewrite the signature of an endpoint so FastAPI follows its bindify markers.

    Parameters without bindify markers are left untouched. Parameters that
    are never bound are removed from the signature, they keep their default.
    Parameters bound from outside the request, such as FromServices, are
    resolved by their other annotations (e.g. Depends) or keep their default.

    Args:
        f (F | None, optional): The endpoint function. Defaults to None.
        resolver (BindingMetadataResolver | None, optional): The resolver to use. Defaults to None.

    Raises:
        BindingNotAllowedError: If a parameter without default is never bound.
        UnsupportedBindingSourceError: If a binding source has no FastAPI counterpart,
            or a parameter bound from outside the request has no way to be provided.

    Returns:
        The wrapped endpoint.
    """
    if f is None:
        return lambda func: binding_endpoint(func, resolver=resolver)

    resolver = resolver or BindingMetadataResolver()
    signature = inspect.signature(f)
    type_hints = get_type_hints(f, include_extras=True)

    parameters = []
    for parameter in signature.parameters.values():
        annotation = type_hints.get(parameter.name, parameter.annotation)
        if not _has_markers(annotation):
            parameters.append(parameter)
            continue
        bound = _bind_parameter(f, parameter, annotation, resolver)
        if bound is not None:
            parameters.append(bound)

    if asyncio.iscoroutinefunction(f):

        @wraps(f)
        async def async_wrapper(*args, **kwargs):
            return await f(*args, **kwargs)

        wrapper: Callable[..., Any] = async_wrapper
    else:

        @wraps(f)
        def sync_wrapper(*args, **kwargs):
            return f(*args, **kwargs)

        wrapper = sync_wrapper

    # FastAPI passes every parameter by keyword, which allows parameters
    # without default to follow parameters with default.
    parameters = [
        parameter.replace(kind=inspect.Parameter.KEYWORD_ONLY)
        if parameter.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD
        else parameter
        for parameter in parameters
    ]
    wrapper.__signature__ = signature.replace(parameters=parameters)  # type: ignore[attr-defined]
    return wrapper
