"""Static country to currency lookup."""
from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_CURRENCY = "USD"

COUNTRY_CURRENCY: Mapping[str, str] = MappingProxyType({
    "KZ": "KZT",
    "US": "USD",
    "GB": "GBP",
    "RU": "RUB",
    "FR": "EUR",
    "DE": "EUR",
    "ES": "EUR",
    "IT": "EUR",
    "JP": "JPY",
    "CN": "CNY",
})


def currency_for_country(country_code: Optional[str]) -> str:
    """Return the currency for an ISO country code, or USD when unmapped."""
    return COUNTRY_CURRENCY.get((country_code or "").strip().upper(), DEFAULT_CURRENCY)
