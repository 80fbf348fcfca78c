from .base import ProviderAdapter
from .weather import WeatherAdapter
from .news import NewsAdapter
from .currency import CurrencyAdapter, cross_rate
from .factory import get_weather_adapter, get_news_adapter, get_currency_adapter

__all__ = [
    "ProviderAdapter",
    "WeatherAdapter",
    "NewsAdapter",
    "CurrencyAdapter",
    "cross_rate",
    "get_weather_adapter",
    "get_news_adapter",
    "get_currency_adapter",
]
