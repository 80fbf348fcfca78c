"""Shared fixtures: canned provider payloads and stub transports."""
import httpx
import pytest

from cityboard.adapters import CurrencyAdapter, NewsAdapter, WeatherAdapter

WEATHER_URL = "https://weather.test/data/2.5"
NEWS_URL = "https://news.test/api/v4"
CURRENCY_URL = "https://rates.test/v6"


def weather_payload(name="Paris", country="FR", lat=48.8534, lon=2.3488, **overrides):
    """OpenWeatherMap current-weather response."""
    payload = {
        "coord": {"lon": lon, "lat": lat},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "main": {"temp": 14.2, "feels_like": 13.1, "pressure": 1012, "humidity": 81},
        "wind": {"speed": 4.1, "deg": 230},
        "rain": {"3h": 0.6},
        "sys": {"country": country},
        "name": name,
        "cod": 200,
    }
    payload.update(overrides)
    return payload


def news_payload(count=3):
    """GNews search response with `count` articles."""
    return {
        "totalArticles": 120,
        "articles": [
            {
                "title": f"Headline {i}",
                "description": f"Story number {i}",
                "content": "...",
                "url": f"https://example.com/story-{i}",
                "image": None,
                "publishedAt": "2026-10-18T09:30:00Z",
                "source": {"name": "Example Times", "url": "https://example.com"},
            }
            for i in range(count)
        ],
    }


RATES = {
    "USD": 1,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 149.5,
    "KZT": 478.3,
    "CNY": 7.3,
}


def rates_payload(rates=None):
    """ExchangeRate-API latest/USD response."""
    return {
        "result": "success",
        "time_last_update_utc": "Sun, 18 Oct 2026 00:00:01 +0000",
        "base_code": "USD",
        "conversion_rates": dict(RATES if rates is None else rates),
    }


class ProviderStub:
    """Records requests and answers them with a handler."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def json_stub(payload, status_code=200) -> ProviderStub:
    return ProviderStub(lambda request: httpx.Response(status_code, json=payload))


def make_weather_adapter(stub, api_key="weather-key") -> WeatherAdapter:
    return WeatherAdapter(api_key=api_key, base_url=WEATHER_URL, timeout=5.0, transport=stub.transport)


def make_news_adapter(stub, api_key="news-key") -> NewsAdapter:
    return NewsAdapter(api_key=api_key, base_url=NEWS_URL, timeout=5.0, transport=stub.transport)


def make_currency_adapter(stub, api_key="rates-key") -> CurrencyAdapter:
    return CurrencyAdapter(api_key=api_key, base_url=CURRENCY_URL, timeout=5.0, transport=stub.transport)


@pytest.fixture
def weather_stub():
    return json_stub(weather_payload())


@pytest.fixture
def news_stub():
    return json_stub(news_payload())


@pytest.fixture
def currency_stub():
    return json_stub(rates_payload())
