"""OpenWeatherMap current-weather adapter."""
import logging
from typing import Optional

from cityboard.adapters.base import ProviderAdapter, require_text
from cityboard.errors import UpstreamBadRequest, UpstreamNotFound, UpstreamUnavailable
from cityboard.models.weather import Coordinates, WeatherReport

logger = logging.getLogger(__name__)


class WeatherAdapter(ProviderAdapter):
    """Fetches current conditions for a city from OpenWeatherMap."""

    api_key_env = "OPENWEATHER_API_KEY"
    unavailable_message = "Failed to fetch weather data"

    async def fetch(self, city: Optional[str]) -> WeatherReport:
        """
        Get current weather for a free-text city name.

        Raises:
            MissingParameter: city is blank
            ConfigMissing: no API key configured
            UpstreamNotFound: provider knows no such city
            UpstreamBadRequest: provider rejected the query
            UpstreamUnavailable: any other provider or network failure
        """
        city = require_text(city, "Missing required query parameter: city")
        api_key = self._require_api_key()

        response = await self._get(
            f"{self.base_url}/weather",
            params={"q": city, "appid": api_key, "units": "metric"},
        )
        data = self._json(response)

        if response.status_code == 404:
            logger.info("City not found", extra={"city": city})
            raise UpstreamNotFound()
        if response.status_code == 400:
            logger.warning("Weather provider rejected request: %s", data)
            raise UpstreamBadRequest(details=data)
        if response.status_code != 200 or not isinstance(data, dict):
            logger.error("Weather provider error %s: %s", response.status_code, self._redact(response.text))
            raise UpstreamUnavailable(self.unavailable_message)

        try:
            return self._to_report(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Unexpected weather payload: %s", e)
            raise UpstreamUnavailable(self.unavailable_message) from e

    @staticmethod
    def _to_report(data: dict) -> WeatherReport:
        """Map the provider payload onto a WeatherReport."""
        main = data["main"]
        conditions = data.get("weather") or [{}]
        condition = conditions[0] if isinstance(conditions[0], dict) else {}
        rain = data.get("rain") or {}

        return WeatherReport(
            city=data["name"],
            country=(data.get("sys") or {}).get("country") or "",
            coords=Coordinates(lat=data["coord"]["lat"], lon=data["coord"]["lon"]),
            temperature=main["temp"],
            feels_like=main["feels_like"],
            description=condition.get("description") or "",
            icon=condition.get("icon") or "",
            humidity=main["humidity"],
            pressure=main["pressure"],
            wind_speed=(data.get("wind") or {}).get("speed", 0),
            rain_3h=rain.get("3h") or 0,
        )
