"""Tests for the currency adapter and cross-rate computation."""
import itertools
import math

import httpx
import pytest

from cityboard.adapters import cross_rate
from cityboard.errors import (
    ConfigMissing,
    MissingParameter,
    RateNotFound,
    UpstreamBadGateway,
    UpstreamUnavailable,
)
from conftest import RATES, ProviderStub, json_stub, make_currency_adapter, rates_payload


def test_cross_rate_divides_target_by_base():
    """Test rate = table(target) / table(base)."""
    assert cross_rate(RATES, "EUR", "USD") == pytest.approx(1 / 0.92)
    assert cross_rate(RATES, "USD", "JPY") == pytest.approx(149.5)
    assert cross_rate(RATES, "GBP", "EUR") == pytest.approx(0.92 / 0.79)


def test_cross_rate_round_trip():
    """Test rate(a, b) * rate(b, a) is 1 for every pair in the table."""
    for base, target in itertools.permutations(RATES, 2):
        product = cross_rate(RATES, base, target) * cross_rate(RATES, target, base)
        assert abs(product - 1) < 1e-6


def test_cross_rate_same_currency_is_one():
    """Test base == target gives exactly 1."""
    assert cross_rate(RATES, "USD", "USD") == 1


@pytest.mark.parametrize(
    "base,target",
    [("XXX", "USD"), ("USD", "XXX"), ("XXX", "YYY")],
)
def test_cross_rate_unknown_code(base, target):
    """Test codes missing from the table never yield a number."""
    with pytest.raises(RateNotFound):
        cross_rate(RATES, base, target)


@pytest.mark.parametrize(
    "bad_rate",
    [0, 0.0, -1.5, float("nan"), float("inf"), "0.92", None, True],
)
def test_cross_rate_invalid_base_rate(bad_rate):
    """Test zero, negative, non-finite or non-numeric denominators are RateNotFound."""
    rates = dict(RATES, EUR=bad_rate)
    with pytest.raises(RateNotFound):
        cross_rate(rates, "EUR", "USD")


def test_cross_rate_invalid_target_rate():
    """Test a non-finite numerator is RateNotFound, not Infinity."""
    rates = dict(RATES, EUR=float("inf"))
    with pytest.raises(RateNotFound):
        cross_rate(rates, "USD", "EUR")


@pytest.mark.asyncio
async def test_fetch_returns_quote(currency_stub):
    """Test a successful quote echoes the codes and provider date."""
    adapter = make_currency_adapter(currency_stub)

    quote = await adapter.fetch("EUR", "USD")

    assert quote.base == "EUR"
    assert quote.target == "USD"
    assert quote.rate == pytest.approx(1 / 0.92)
    assert math.isfinite(quote.rate)
    assert quote.date == "Sun, 18 Oct 2026 00:00:01 +0000"


@pytest.mark.asyncio
async def test_fetch_requests_usd_table(currency_stub):
    """Test the table is always requested anchored to USD with the key in the path."""
    adapter = make_currency_adapter(currency_stub)

    await adapter.fetch("GBP", "JPY")

    assert len(currency_stub.requests) == 1
    assert currency_stub.requests[0].url.path == "/v6/rates-key/latest/USD"


@pytest.mark.asyncio
async def test_fetch_normalizes_code_case(currency_stub):
    """Test lower-case codes are matched against the table."""
    adapter = make_currency_adapter(currency_stub)

    quote = await adapter.fetch("eur", " usd ")

    assert (quote.base, quote.target) == ("EUR", "USD")


@pytest.mark.asyncio
async def test_missing_date_is_null():
    """Test a table without an update time yields date None."""
    payload = rates_payload()
    del payload["time_last_update_utc"]
    adapter = make_currency_adapter(json_stub(payload))

    quote = await adapter.fetch("EUR", "USD")

    assert quote.date is None


@pytest.mark.asyncio
@pytest.mark.parametrize("base,target", [("", "USD"), ("EUR", ""), (None, None), ("  ", "USD")])
async def test_missing_codes(currency_stub, base, target):
    """Test either code missing is MissingParameter with no outbound call."""
    adapter = make_currency_adapter(currency_stub)

    with pytest.raises(MissingParameter) as exc_info:
        await adapter.fetch(base, target)

    assert exc_info.value.message == "Missing required query parameters: base and target"
    assert currency_stub.requests == []


@pytest.mark.asyncio
async def test_missing_api_key(currency_stub):
    """Test an unconfigured key raises ConfigMissing."""
    adapter = make_currency_adapter(currency_stub, api_key="")

    with pytest.raises(ConfigMissing) as exc_info:
        await adapter.fetch("EUR", "USD")

    assert "CURRENCY_API_KEY" in exc_info.value.message


@pytest.mark.asyncio
async def test_unknown_code_is_rate_not_found(currency_stub):
    """Test a code absent from the provider table raises RateNotFound."""
    adapter = make_currency_adapter(currency_stub)

    with pytest.raises(RateNotFound) as exc_info:
        await adapter.fetch("XXX", "USD")

    assert exc_info.value.message == "Currency rate not found"


@pytest.mark.asyncio
async def test_provider_failure_flag_is_bad_gateway():
    """Test result != success is surfaced as 502 with the provider's error type."""
    adapter = make_currency_adapter(json_stub({"result": "error", "error-type": "quota-reached"}))

    with pytest.raises(UpstreamBadGateway) as exc_info:
        await adapter.fetch("EUR", "USD")

    assert exc_info.value.status_code == 502
    assert exc_info.value.to_body() == {
        "error": "Failed to fetch currency data from provider",
        "details": "quota-reached",
    }


@pytest.mark.asyncio
async def test_failure_flag_on_error_status_is_bad_gateway():
    """Test the provider flag wins even when the HTTP status is an error."""
    adapter = make_currency_adapter(json_stub({"result": "error", "error-type": "invalid-key"}, status_code=403))

    with pytest.raises(UpstreamBadGateway) as exc_info:
        await adapter.fetch("EUR", "USD")

    assert exc_info.value.details == "invalid-key"


@pytest.mark.asyncio
async def test_failure_flag_without_error_type():
    """Test a missing error-type gives null details."""
    adapter = make_currency_adapter(json_stub({"result": "error"}))

    with pytest.raises(UpstreamBadGateway) as exc_info:
        await adapter.fetch("EUR", "USD")

    assert exc_info.value.to_body()["details"] is None


@pytest.mark.asyncio
async def test_server_error_without_flag_is_unavailable():
    """Test a provider 5xx with no result flag is UpstreamUnavailable."""
    stub = ProviderStub(lambda request: httpx.Response(503, text="Service Unavailable"))
    adapter = make_currency_adapter(stub)

    with pytest.raises(UpstreamUnavailable) as exc_info:
        await adapter.fetch("EUR", "USD")

    assert exc_info.value.message == "Failed to fetch currency data"


@pytest.mark.asyncio
async def test_network_error_is_unavailable():
    """Test transport errors map to UpstreamUnavailable."""
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    adapter = make_currency_adapter(ProviderStub(handler))

    with pytest.raises(UpstreamUnavailable):
        await adapter.fetch("EUR", "USD")


@pytest.mark.asyncio
async def test_missing_table_is_rate_not_found():
    """Test a success flag without a conversion table is RateNotFound."""
    adapter = make_currency_adapter(json_stub({"result": "success"}))

    with pytest.raises(RateNotFound):
        await adapter.fetch("EUR", "USD")
