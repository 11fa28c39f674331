"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    lead_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when lead_repository=postgres
    admin_enabled: bool = False
    admin_list_limit: int = 200
    address_api_base_url: str = "https://api-adresse.data.gouv.fr"
    address_api_timeout_seconds: float = 5.0
    address_search_limit: int = 6
    rate_limit_enabled: bool = False
    redis_url: str = "redis://localhost:6379/0"
    rate_limit_max_submissions: int = 5
    rate_limit_window_seconds: int = 600  # 10 minutes
    intake_endpoint_url: str = "http://localhost:8000/api/publier-projet"
    intake_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
