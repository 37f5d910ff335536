from dataclasses import dataclass
from typing import Annotated, Optional

from pytest import raises

from bindify.context import ResolutionContext, property_contexts
from bindify.errors import (
    InvalidResolutionKeyError,
    MissingParameterTypeAnnotation,
    MissingPropertyTypeAnnotation,
)
from bindify.keys import PARAMETER, PROPERTY, TYPE, ResolutionKey
from bindify.markers import (
    BindRequired,
    FromBody,
    FromForm,
    FromQuery,
    Name,
    annotate,
)


@annotate(FromBody())
@dataclass
class Payload:
    content: str


@dataclass
class Address:
    street: Annotated[str, FromForm("street_name"), BindRequired]
    zip_code: Annotated[str | None, FromQuery("zip")] = None
    country: Annotated[Optional[str], "documentation", Name("c")] = None
    payload: Annotated[Payload, Name("p")] | None = None
    note = "not annotated"


def create_address(
    street: Annotated[str, FromQuery("s")], payload: Payload, untyped
) -> Address:
    return Address(street)


def test_for_property():
    context = ResolutionContext.for_property(Address, "street")
    assert context.key == ResolutionKey(PROPERTY, str, Address, "street")
    assert context.property_attributes == (FromForm("street_name"), BindRequired)
    assert context.attributes == context.property_attributes
    assert context.parameter_attributes == ()


def test_optional_property_is_unwrapped():
    assert ResolutionContext.for_property(Address, "zip_code").key.model_type is str
    assert ResolutionContext.for_property(Address, "country").key.model_type is str


def test_only_markers_are_collected():
    context = ResolutionContext.for_property(Address, "country")
    assert context.property_attributes == (Name("c"),)


def test_property_type_markers_follow_property_markers():
    context = ResolutionContext.for_property(Address, "payload")
    assert context.key.model_type is Payload
    assert context.property_attributes == (Name("p"),)
    assert context.attributes == (Name("p"), FromBody())


def test_property_without_annotation():
    with raises(MissingPropertyTypeAnnotation):
        ResolutionContext.for_property(Address, "note")


def test_for_parameter():
    context = ResolutionContext.for_parameter(create_address, "street")
    assert context.key == ResolutionKey(PARAMETER, str, None, "street")
    assert context.parameter_attributes == (FromQuery("s"),)
    assert context.property_attributes == ()

    context = ResolutionContext.for_parameter(create_address, "payload")
    assert context.parameter_attributes == ()
    assert context.attributes == (FromBody(),)


def test_for_class_parameter():
    context = ResolutionContext.for_parameter(Address, "zip_code")
    assert context.key.kind == PARAMETER
    assert context.parameter_attributes == (FromQuery("zip"),)


def test_parameter_errors():
    with raises(MissingParameterTypeAnnotation):
        ResolutionContext.for_parameter(create_address, "untyped")

    with raises(ValueError):
        ResolutionContext.for_parameter(create_address, "unknown")


def test_for_type():
    context = ResolutionContext.for_type(Payload)
    assert context.key == ResolutionKey(TYPE, Payload)
    assert context.attributes == (FromBody(),)

    context = ResolutionContext.for_type(Annotated[Payload, Name("x")])
    assert context.key.model_type is Payload
    assert context.attributes == (Name("x"), FromBody())


def test_property_contexts():
    contexts = property_contexts(Address)
    assert [context.key.name for context in contexts] == [
        "street",
        "zip_code",
        "country",
        "payload",
    ]


def test_invalid_keys():
    with raises(InvalidResolutionKeyError):
        ResolutionKey(PROPERTY, str, None, "value")

    with raises(InvalidResolutionKeyError):
        ResolutionKey(PROPERTY, str, Address, None)

    with raises(InvalidResolutionKeyError):
        ResolutionKey(TYPE, str, Address)

    with raises(InvalidResolutionKeyError):
        ResolutionKey("method", str)


def test_key_str():
    assert str(ResolutionKey.for_property(str, "street", Address)).endswith(
        "Address.street: builtins.str"
    )
    assert str(ResolutionKey.for_parameter(int, "page")) == (
        "parameter page: builtins.int"
    )
