"""Factories building provider adapters from application settings."""
from cityboard.adapters.currency import CurrencyAdapter
from cityboard.adapters.news import NewsAdapter
from cityboard.adapters.weather import WeatherAdapter
from cityboard.config import settings


def get_weather_adapter() -> WeatherAdapter:
    """Build a weather adapter; also used as a FastAPI dependency."""
    return WeatherAdapter(
        api_key=settings.openweather_api_key,
        base_url=settings.openweather_base_url,
        timeout=settings.request_timeout,
    )


def get_news_adapter() -> NewsAdapter:
    """Build a news adapter; also used as a FastAPI dependency."""
    return NewsAdapter(
        api_key=settings.news_api_key,
        base_url=settings.news_base_url,
        timeout=settings.request_timeout,
    )


def get_currency_adapter() -> CurrencyAdapter:
    """Build a currency adapter; also used as a FastAPI dependency."""
    return CurrencyAdapter(
        api_key=settings.currency_api_key,
        base_url=settings.currency_base_url,
        timeout=settings.request_timeout,
    )
