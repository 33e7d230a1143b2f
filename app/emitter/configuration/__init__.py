"""Configuration module - public API.

Centralized configuration for the event registry using Pydantic
BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    RegistrySettings: Registry defaults settings class (for testing)

Example:
    ```python
    from emitter.services import get_settings

    settings = get_settings()

    log_level = settings.LOG_LEVEL
    isolate = settings.registry.ISOLATE_CALLBACK_ERRORS
    ```
"""

from emitter.configuration.settings import Settings
from emitter.configuration.registry import RegistrySettings

__all__ = ["Settings", "RegistrySettings"]
