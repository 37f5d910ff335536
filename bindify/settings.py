"""Configuration of the binding metadata resolution.

Settings are read from environment variables prefixed with BINDIFY_,
or from a dotenv file.

Example:
    BINDIFY_DISCOVER_FACTORY_CONSTRUCTORS=false
    BINDIFY_INHERIT_CONTAINER_BEHAVIOR=true
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("ResolverSettings",)


class ResolverSettings(BaseSettings):
    """Settings for BindingMetadataResolver.

    Attributes:
        discover_factory_constructors (bool): Consider public classmethods returning
            the class as constructors, in addition to __init__.
        inherit_container_behavior (bool): Let properties fall back to binding behavior
            markers declared on the bases of their container type, not only on the
            container type itself.
    """

    model_config = SettingsConfigDict(env_prefix="BINDIFY_", frozen=True)

    discover_factory_constructors: bool = True
    inherit_container_behavior: bool = False
