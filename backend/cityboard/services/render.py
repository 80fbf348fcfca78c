"""Plain-text rendering of search results."""
from typing import List, Optional

from cityboard.models import CurrencyQuote, NewsBundle, WeatherReport
from cityboard.utils.timestamp import format_timestamp

MAP_SPAN_DEGREES = 0.1

NEWS_UNAVAILABLE = "News is not available."
NO_NEWS = "No news found for this city."
CURRENCY_UNAVAILABLE = "Currency information is not available."


def map_embed_url(lat: float, lon: float) -> str:
    """OpenStreetMap embed URL centred on a point with a marker."""
    return (
        "https://www.openstreetmap.org/export/embed.html"
        f"?bbox={lon - MAP_SPAN_DEGREES}%2C{lat - MAP_SPAN_DEGREES}"
        f"%2C{lon + MAP_SPAN_DEGREES}%2C{lat + MAP_SPAN_DEGREES}"
        f"&layer=mapnik&marker={lat}%2C{lon}"
    )


def icon_url(icon: str) -> str:
    return f"https://openweathermap.org/img/wn/{icon}@2x.png" if icon else ""


def render_weather(weather: WeatherReport) -> List[str]:
    return [
        f"{weather.city}, {weather.country}",
        f"  {round(weather.temperature)}°C, {weather.description}",
        f"  Feels like: {round(weather.feels_like)}°C",
        f"  Lat: {weather.coords.lat:.3f}, Lon: {weather.coords.lon:.3f}",
        f"  Humidity: {weather.humidity}%",
        f"  Pressure: {weather.pressure} hPa",
        f"  Wind: {weather.wind_speed} m/s",
        f"  Rain (last 3h): {weather.rain_3h} mm",
    ]


def render_news(news: Optional[NewsBundle]) -> List[str]:
    if news is None:
        return [NEWS_UNAVAILABLE]
    if not news.articles:
        return [NO_NEWS]

    lines = []
    for article in news.articles:
        lines.append(f"- {article.title}")
        if article.description:
            lines.append(f"  {article.description}")
        lines.append(
            f"  Source: {article.source or 'Unknown'} | "
            f"Published: {format_timestamp(article.published_at or '')}"
        )
        lines.append(f"  {article.url}")
    return lines


def render_currency(currency: Optional[CurrencyQuote], base: str, target: str) -> List[str]:
    if currency is None or not currency.rate:
        return [CURRENCY_UNAVAILABLE]

    # Shown as the price of one target unit in the local (base) currency
    inverted = 1 / currency.rate
    return [
        f"Base currency (approx.): {base}",
        f"Target currency: {target}",
        f"Exchange rate: 1 {target} = {inverted:.2f} {base}",
        f"Rate date: {currency.date or 'unknown'}",
    ]
