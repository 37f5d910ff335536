"""Default binding markers implemented by bindify.

Markers are placed in typing.Annotated metadata, or attached to a class
using @annotate. When several markers provide the same capability, the
first one declared wins.

Example:
    from typing import Annotated

    from bindify.context import ResolutionContext
    from bindify.markers import BindRequired, FromQuery
    from bindify.resolver import BindingMetadataResolver

    def search(term: Annotated[str, FromQuery("q"), BindRequired]) -> None:
        ...

    resolver = BindingMetadataResolver()
    metadata = resolver.resolve(ResolutionContext.for_parameter(search, "term"))
    print(metadata.binder_model_name, metadata.is_binding_required)
    #> q True
"""

from bindify._markers import (
    Bind,
    BindingBehaviorMarker,
    BindNever,
    BindOptional,
    BindRequired,
    FromBody,
    FromForm,
    FromHeader,
    FromQuery,
    FromRoute,
    FromServices,
    ModelBinder,
    Name,
    annotate,
)

__all__ = (
    "Bind",
    "BindingBehaviorMarker",
    "BindNever",
    "BindOptional",
    "BindRequired",
    "FromBody",
    "FromForm",
    "FromHeader",
    "FromQuery",
    "FromRoute",
    "FromServices",
    "ModelBinder",
    "Name",
    "annotate",
)
