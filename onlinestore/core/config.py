"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

ALL_SERVICES = ("catalog", "customers", "orders", "payments")
DEVELOPMENT_ENVIRONMENT = "development"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Runtime mode. "Development" reveals diagnostic
            details in 500 responses; any other value hides them.
        debug: Expose interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Rate limit for read endpoints.
        rate_limit_write: Rate limit for endpoints that mutate state.
        seed_sample_data: Preload the sample customers and products.
        enabled_services: Bounded contexts mounted by the app factory.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "OnlineStoreMVP"
    version: str = "0.1.0"
    environment: str = "Production"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "120/minute"
    rate_limit_write: str = "60/minute"
    seed_sample_data: bool = True
    enabled_services: list[str] = list(ALL_SERVICES)

    @property
    def is_development(self) -> bool:
        """Return True when running in development mode."""
        return self.environment.strip().lower() == DEVELOPMENT_ENVIRONMENT


settings = Settings()
