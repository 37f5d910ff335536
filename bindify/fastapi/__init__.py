"""Supports for FastAPI integration."""

from .params import as_fastapi_param, binding_endpoint

__all__ = (
    "as_fastapi_param",
    "binding_endpoint",
)
