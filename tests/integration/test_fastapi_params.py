import asyncio
import inspect
from typing import Annotated, get_args

import pytest
from fastapi import Depends, FastAPI
from fastapi.params import Body, Header, Path, Query

from bindify.binding_metadata import BindingMetadata
from bindify.errors import BindingNotAllowedError, UnsupportedBindingSourceError
from bindify.fastapi import as_fastapi_param, binding_endpoint
from bindify.markers import (
    BindNever,
    BindRequired,
    FromHeader,
    FromQuery,
    FromRoute,
    FromServices,
    ModelBinder,
)
from bindify.sources import BODY, CUSTOM, HEADER, QUERY, ROUTE, SERVICES


def get_item(
    item_id: Annotated[int, FromRoute()],
    term: Annotated[str, FromQuery("q"), BindRequired],
    page: Annotated[int, FromQuery()] = 1,
    agent: Annotated[str | None, FromHeader("user-agent")] = None,
    internal: Annotated[bool, BindNever] = False,
    verbose: bool = False,
) -> dict:
    return {
        "item_id": item_id,
        "term": term,
        "page": page,
        "agent": agent,
        "internal": internal,
        "verbose": verbose,
    }


def test_as_fastapi_param():
    param = as_fastapi_param(
        BindingMetadata(binder_model_name="q", binding_source=QUERY)
    )
    assert isinstance(param, Query)
    assert param.alias == "q"

    assert isinstance(as_fastapi_param(BindingMetadata(binding_source=ROUTE)), Path)
    assert isinstance(
        as_fastapi_param(BindingMetadata(binding_source=HEADER)), Header
    )
    assert isinstance(as_fastapi_param(BindingMetadata(binding_source=BODY)), Body)


def test_as_fastapi_param_without_binding():
    assert as_fastapi_param(BindingMetadata()) is None
    assert (
        as_fastapi_param(
            BindingMetadata(binding_source=QUERY, is_binding_allowed=False)
        )
        is None
    )


def test_as_fastapi_param_outside_request():
    assert as_fastapi_param(BindingMetadata(binding_source=SERVICES)) is None


def test_as_fastapi_param_unsupported_source():
    with pytest.raises(UnsupportedBindingSourceError):
        as_fastapi_param(BindingMetadata(binding_source=CUSTOM))


def test_endpoint_signature():
    endpoint = binding_endpoint(get_item)
    parameters = inspect.signature(endpoint).parameters

    assert list(parameters) == ["item_id", "term", "page", "agent", "verbose"]
    assert parameters["term"].default is inspect.Parameter.empty
    assert parameters["page"].default == 1
    assert parameters["verbose"].annotation is bool


def test_endpoint_keeps_behavior():
    endpoint = binding_endpoint(get_item)
    result = endpoint(item_id=1, term="shoes", page=2, agent=None, verbose=True)
    assert result == {
        "item_id": 1,
        "term": "shoes",
        "page": 2,
        "agent": None,
        "internal": False,
        "verbose": True,
    }


def test_openapi_parameters():
    app = FastAPI()
    app.get("/items/{item_id}")(binding_endpoint(get_item))

    operation = app.openapi()["paths"]["/items/{item_id}"]["get"]
    parameters = {
        parameter["name"]: (parameter["in"], parameter["required"])
        for parameter in operation["parameters"]
    }
    assert parameters == {
        "item_id": ("path", True),
        "q": ("query", True),
        "page": ("query", False),
        "user-agent": ("header", False),
        "verbose": ("query", False),
    }


def test_never_bound_parameter_requires_default():
    def endpoint(secret: Annotated[str, BindNever]) -> None:
        pass

    with pytest.raises(BindingNotAllowedError):
        binding_endpoint(endpoint)


def test_unsupported_source():
    def endpoint(value: Annotated[str, ModelBinder(object)]) -> None:
        pass

    with pytest.raises(UnsupportedBindingSourceError):
        binding_endpoint(endpoint)


class Mailer:
    def send(self, to: str) -> str:
        return f"sent to {to}"


def get_mailer() -> Mailer:
    return Mailer()


def notify(
    to: Annotated[str, FromQuery()],
    mailer: Annotated[Mailer, FromServices(), Depends(get_mailer)],
    fallback: Annotated[Mailer | None, FromServices()] = None,
) -> str:
    return mailer.send(to)


def test_services_are_left_to_dependencies():
    endpoint = binding_endpoint(notify)
    parameters = inspect.signature(endpoint).parameters

    assert list(parameters) == ["to", "mailer"]
    base, dependency = get_args(parameters["mailer"].annotation)
    assert base is Mailer
    assert dependency.dependency is get_mailer
    assert endpoint(to="a", mailer=Mailer()) == "sent to a"

    app = FastAPI()
    app.get("/notify")(endpoint)
    operation = app.openapi()["paths"]["/notify"]["get"]
    assert [parameter["name"] for parameter in operation["parameters"]] == ["to"]


def test_services_without_default_or_dependency():
    def endpoint(mailer: Annotated[Mailer, FromServices()]) -> None:
        pass

    with pytest.raises(UnsupportedBindingSourceError):
        binding_endpoint(endpoint)


def test_async_endpoint():
    @binding_endpoint
    async def endpoint(term: Annotated[str, FromQuery("q")]) -> str:
        return term

    assert asyncio.iscoroutinefunction(endpoint)
    assert asyncio.run(endpoint(term="value")) == "value"
