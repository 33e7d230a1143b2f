"""Event registry settings."""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from emitter.configuration.base import ComponentSettings


class RegistrySettings(ComponentSettings):
    """Defaults applied to the shared event registry.

    Environment Variables:
        EMITTER_DEFAULT_TAG: Tag used when a subscriber omits one (default: general)
        EMITTER_DEFAULT_CALLBACK_ID: Callback id used when a subscriber omits one
            (default: default)
        EMITTER_ISOLATE_CALLBACK_ERRORS: Log callback failures and keep dispatching
            instead of propagating the first one (default: False)
        EMITTER_LOG_PAYLOADS: Include emitted data in debug logs, with secrets
            redacted (default: False)

    Example:
        ```python
        from emitter.services import get_settings

        settings = get_settings()

        if settings.registry.ISOLATE_CALLBACK_ERRORS:
            # Failing callbacks no longer abort an emission...
        ```
    """

    model_config = SettingsConfigDict(env_prefix="EMITTER_")

    DEFAULT_TAG: str = Field(
        default="general",
        description="Tag used when subscribe() is called without one",
    )

    DEFAULT_CALLBACK_ID: str = Field(
        default="default",
        description="Callback id used when subscribe() is called without one",
    )

    ISOLATE_CALLBACK_ERRORS: bool = Field(
        default=False,
        description="Catch and log callback exceptions instead of propagating them",
    )

    LOG_PAYLOADS: bool = Field(
        default=False,
        description="Log emitted data at debug level with sensitive keys redacted",
    )
