from .weather import Coordinates, WeatherReport
from .news import Article, NewsBundle
from .currency import CurrencyQuote
from .errors import ErrorBody

__all__ = [
    "Coordinates",
    "WeatherReport",
    "Article",
    "NewsBundle",
    "CurrencyQuote",
    "ErrorBody",
]
