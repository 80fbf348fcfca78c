"""ExchangeRate-API adapter."""
import logging
import math
from typing import Any, Mapping, Optional

from cityboard.adapters.base import ProviderAdapter
from cityboard.errors import MissingParameter, RateNotFound, UpstreamBadGateway, UpstreamUnavailable
from cityboard.models.currency import CurrencyQuote

logger = logging.getLogger(__name__)

# All rates are requested against this currency and converted locally
REFERENCE_CURRENCY = "USD"


def cross_rate(rates: Mapping[str, Any], base: str, target: str) -> float:
    """
    Compute units of target per one unit of base from a reference-anchored table.

    Raises RateNotFound when either code is absent or the result would not be
    a positive finite number.
    """
    base_rate = rates.get(base)
    target_rate = rates.get(target)
    for value in (base_rate, target_rate):
        # bool is an int subclass but never a valid rate
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RateNotFound()
    if not math.isfinite(base_rate) or base_rate <= 0:
        raise RateNotFound()

    rate = target_rate / base_rate
    if not math.isfinite(rate) or rate <= 0:
        raise RateNotFound()
    return rate


class CurrencyAdapter(ProviderAdapter):
    """Quotes an exchange rate from the provider's USD-anchored rate table."""

    api_key_env = "CURRENCY_API_KEY"
    unavailable_message = "Failed to fetch currency data"

    async def fetch(self, base: Optional[str], target: Optional[str]) -> CurrencyQuote:
        """
        Get the rate for converting base into target.

        Raises:
            MissingParameter: base or target is blank
            ConfigMissing: no API key configured
            UpstreamBadGateway: provider reported an unsuccessful result
            RateNotFound: a code is not in the provider's table
            UpstreamUnavailable: any other provider or network failure
        """
        base = (base or "").strip().upper()
        target = (target or "").strip().upper()
        if not base or not target:
            raise MissingParameter("Missing required query parameters: base and target")
        api_key = self._require_api_key()

        response = await self._get(f"{self.base_url}/{api_key}/latest/{REFERENCE_CURRENCY}")
        data = self._json(response)

        # The provider's own result flag is authoritative whenever it is present
        if isinstance(data, dict) and "result" in data and data["result"] != "success":
            logger.error("Exchange rate provider error: %s", data.get("error-type"))
            raise UpstreamBadGateway(
                "Failed to fetch currency data from provider",
                details=data.get("error-type"),
            )
        if response.status_code != 200 or not isinstance(data, dict):
            logger.error("Exchange rate provider error %s: %s", response.status_code, self._redact(response.text))
            raise UpstreamUnavailable(self.unavailable_message)

        rates = data.get("conversion_rates")
        if not isinstance(rates, dict):
            logger.warning("Exchange rate payload has no conversion table")
            raise RateNotFound()

        rate = cross_rate(rates, base, target)
        return CurrencyQuote(
            base=base,
            target=target,
            rate=rate,
            date=data.get("time_last_update_utc"),
        )
