"""Base provider adapter interface."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from cityboard.config import settings
from cityboard.errors import ConfigMissing, MissingParameter, UpstreamUnavailable

logger = logging.getLogger(__name__)


class ProviderAdapter(ABC):
    """Abstract base class for upstream API adapters.

    An adapter turns a normalized query into one outbound HTTP call and the
    provider's response into a normalized model. Adapters never retry.
    """

    # Name of the environment variable holding the provider credential
    api_key_env: str = ""
    # Message used when the provider cannot be reached
    unavailable_message: str = "Failed to fetch data"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the adapter.

        Args:
            api_key: Provider credential; empty means not configured
            base_url: Provider API root
            timeout: Request timeout in seconds (defaults to settings.request_timeout)
            transport: Optional httpx transport, used by tests to stub the provider
        """
        self.api_key = api_key or ""
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    @abstractmethod
    async def fetch(self, *args: str) -> Any:
        """Run the provider query and return a normalized model."""

    def _require_api_key(self) -> str:
        if not self.api_key:
            logger.error("Provider credential missing", extra={"variable": self.api_key_env})
            raise ConfigMissing(self.api_key_env)
        return self.api_key

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """Issue a GET request, translating transport failures to UpstreamUnavailable."""
        logger.debug("Outbound request", extra={"adapter": type(self).__name__, "url": self._redact(url)})
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                return await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error("%s transport error: %s", type(self).__name__, e)
            raise UpstreamUnavailable(self.unavailable_message) from e

    def _redact(self, text: str) -> str:
        if self.api_key:
            return text.replace(self.api_key, "***")
        return text

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        """Decode a JSON body, returning None when it is not JSON."""
        try:
            return response.json()
        except ValueError:
            return None


def require_text(value: Optional[str], message: str) -> str:
    """Return the stripped value, or raise MissingParameter if it is blank."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise MissingParameter(message)
    return cleaned
