"""This module contains the binding sources a value can be bound from."""

from dataclasses import dataclass

__all__ = (
    "BindingSource",
    "BODY",
    "CUSTOM",
    "FORM",
    "HEADER",
    "QUERY",
    "ROUTE",
    "SERVICES",
)


@dataclass(frozen=True, slots=True)
class BindingSource:
    """Identifies where bound data originates.

    Attributes:
        id (str): The unique identifier of the source.
        display_name (str): Human readable name.
        is_from_request (bool): Whether the data comes from the request.
    """

    id: str
    display_name: str
    is_from_request: bool

    def __str__(self) -> str:
        return self.display_name


BODY = BindingSource("Body", "Body", is_from_request=True)
CUSTOM = BindingSource("Custom", "Custom", is_from_request=True)
FORM = BindingSource("Form", "Form", is_from_request=True)
HEADER = BindingSource("Header", "Header", is_from_request=True)
QUERY = BindingSource("Query", "Query", is_from_request=True)
ROUTE = BindingSource("Route", "Route", is_from_request=True)
SERVICES = BindingSource("Services", "Services", is_from_request=False)
