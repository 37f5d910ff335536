from pytest import fixture

from bindify.constructor import ClassTypeInspector
from bindify.resolver import BindingMetadataResolver
from tests.utils import StaticTypeInspector


@fixture(scope="function")
def resolver() -> BindingMetadataResolver:
    return BindingMetadataResolver()


@fixture(scope="function")
def class_inspector() -> ClassTypeInspector:
    return ClassTypeInspector()


@fixture(scope="function")
def static_inspector() -> StaticTypeInspector:
    return StaticTypeInspector()


@fixture(scope="function")
def static_resolver(static_inspector) -> BindingMetadataResolver:
    return BindingMetadataResolver(static_inspector)
