"""Event registry configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from emitter.configuration.registry import RegistrySettings


class Settings(BaseSettings):
    """Event registry configuration settings - main aggregator.

    Aggregates the application-level logging settings and the
    component settings into a single configuration object.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        APP_NAME: Application name attached to every log entry
        LOG_MAX_VALUE_LENGTH: Longest string value logged before truncation

    Example:
        ```python
        from emitter.services import get_settings

        settings = get_settings()

        default_tag = settings.registry.DEFAULT_TAG

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    APP_NAME: str = "event-registry"
    LOG_MAX_VALUE_LENGTH: int = 500

    # Component settings
    registry: RegistrySettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "registry": RegistrySettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
