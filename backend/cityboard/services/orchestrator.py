"""Client-side search flow over the dashboard API.

A search runs in two phases: the weather request first, then the news and
currency requests concurrently. Weather failure aborts the search; news or
currency failures only blank their own panel.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from cityboard.config import settings
from cityboard.models import CurrencyQuote, NewsBundle, WeatherReport
from cityboard.services.currency_map import DEFAULT_CURRENCY, currency_for_country
from cityboard.services.render import map_embed_url

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

EMPTY_CITY_MESSAGE = "Please enter a city name."
TARGET_CURRENCY = DEFAULT_CURRENCY


class SearchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    PARTIAL_FAILURE = "partial_failure"
    FULL_FAILURE = "full_failure"


class RequestFailed(Exception):
    """The API answered a request with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Request failed ({status_code}): {detail}")


@dataclass
class SearchContext:
    """Everything produced by one search; a panel left as None failed to load."""

    city: str
    state: SearchState = SearchState.IDLE
    weather: Optional[WeatherReport] = None
    news: Optional[NewsBundle] = None
    currency: Optional[CurrencyQuote] = None
    base_currency: Optional[str] = None
    target_currency: str = TARGET_CURRENCY
    map_url: Optional[str] = None
    error: Optional[str] = None


class SearchOrchestrator:
    """Runs searches against the dashboard API one at a time.

    Searches are serialized: a search submitted while another is in flight
    waits for it, so `latest` is always the result of the newest completed
    search.
    """

    def __init__(
        self,
        base_url: str = f"http://localhost:{settings.port}",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport
        self.latest: Optional[SearchContext] = None
        self._state = SearchState.IDLE
        self._lock = asyncio.Lock()

    @property
    def state(self) -> SearchState:
        return self._state

    async def search(self, city: Optional[str]) -> SearchContext:
        """Run a full search for a city and return its context."""
        city = (city or "").strip()
        if not city:
            return SearchContext(city="", state=SearchState.IDLE, error=EMPTY_CITY_MESSAGE)

        async with self._lock:
            context = SearchContext(city=city, state=SearchState.LOADING)
            self._state = SearchState.LOADING
            try:
                async with httpx.AsyncClient(
                    base_url=self.base_url, timeout=self.timeout, transport=self.transport
                ) as client:
                    await self._run(client, context)
            except Exception as e:
                logger.error("Search failed", extra={"city": city, "error": repr(e)})
                context.state = SearchState.FULL_FAILURE
                context.error = str(e) or "Failed to fetch data"
            finally:
                self._state = SearchState.IDLE

            self.latest = context
            return context

    async def _run(self, client: httpx.AsyncClient, context: SearchContext) -> None:
        # Phase 1: weather gates everything else
        weather = await self._get_model(client, "/api/weather", {"city": context.city}, WeatherReport)
        context.weather = weather
        context.map_url = map_embed_url(weather.coords.lat, weather.coords.lon)

        # Phase 2: news and currency are independent of each other
        context.base_currency = currency_for_country(weather.country)
        context.news, context.currency = await asyncio.gather(
            self._get_optional(client, "/api/news", {"city": context.city}, NewsBundle),
            self._get_optional(
                client,
                "/api/currency",
                {"base": context.base_currency, "target": context.target_currency},
                CurrencyQuote,
            ),
        )

        if context.news is not None and context.currency is not None:
            context.state = SearchState.SUCCESS
        else:
            context.state = SearchState.PARTIAL_FAILURE

    async def _get_model(
        self,
        client: httpx.AsyncClient,
        path: str,
        params: Dict[str, Any],
        model: Type[T],
    ) -> T:
        response = await client.get(path, params=params)
        if not response.is_success:
            raise RequestFailed(response.status_code, _error_detail(response))
        return model.model_validate(response.json())

    async def _get_optional(
        self,
        client: httpx.AsyncClient,
        path: str,
        params: Dict[str, Any],
        model: Type[T],
    ) -> Optional[T]:
        """Like _get_model, but a failure yields None instead of raising."""
        try:
            return await self._get_model(client, path, params, model)
        except (httpx.HTTPError, RequestFailed, ValidationError, ValueError) as e:
            logger.warning("Secondary request failed", extra={"path": path, "error": repr(e)})
            return None


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return json.dumps(data)
