"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    application_name: str = "dealerapp"  # Prefix for X-<name>-alert headers
    dealer_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when dealer_repository=postgres
    default_page_size: int = 20
    max_page_size: int = 2000

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
