"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ComponentSettings(BaseSettings):
    """Base class for component-level settings.

    Component settings control core library behavior like the registry
    defaults and error isolation. All sub-settings inherit from this class
    to ensure consistent configuration behavior (env file loading, case
    sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
