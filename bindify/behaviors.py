"""Module containing supported binding behaviors."""

from typing import Literal, TypeAlias

__all__ = (
    "BindingBehavior",
    "NEVER",
    "OPTIONAL",
    "REQUIRED",
    "BINDING_BEHAVIORS",
    "is_binding_behavior",
)

BindingBehavior: TypeAlias = Literal["never", "optional", "required"]
NEVER: BindingBehavior = "never"
OPTIONAL: BindingBehavior = "optional"
REQUIRED: BindingBehavior = "required"

BINDING_BEHAVIORS = {NEVER, OPTIONAL, REQUIRED}


def is_binding_behavior(val: object) -> bool:
    """Check if a value is a valid binding behavior.

    Args:
        val (object): Any value.

    Returns:
        bool: True if the value is a valid binding behavior; otherwise False.
    """
    return val in BINDING_BEHAVIORS
