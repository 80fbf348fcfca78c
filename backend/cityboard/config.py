"""Configuration settings for the application."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "City Dashboard API"
    debug: bool = False
    port: int = 3000
    log_level: str = "INFO"

    # Timeout (seconds) for every outbound provider call
    request_timeout: float = 10.0

    # Provider API keys; an empty key is reported when its endpoint is called
    openweather_api_key: str = ""
    news_api_key: str = ""
    currency_api_key: str = ""

    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    news_base_url: str = "https://gnews.io/api/v4"
    currency_base_url: str = "https://v6.exchangerate-api.com/v6"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
