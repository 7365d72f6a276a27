import asyncio
from datetime import date
from types import SimpleNamespace

import httpx
import pytest

from tripwise.errors import CredentialMissingError, ProviderUnavailable
from tripwise.services.amadeus_client import (
    FLIGHT_OFFERS_PATH,
    HOTEL_OFFERS_PATH,
    TOKEN_PATH,
    AmadeusClient,
    BearerTokenCache,
)
from tripwise.services.currency_client import CurrencyClient
from tripwise.services.llm_client import LLMClient
from tripwise.services.news_client import NewsClient, build_query

BASE_URL = "https://test.api.amadeus.com"


# ─── Bearer token cache ───


async def test_token_cache_reuses_fresh_token():
    calls = []

    async def fetch():
        calls.append(1)
        return "token-a", 1799

    cache = BearerTokenCache(margin_seconds=60)
    assert await cache.get(fetch) == "token-a"
    assert await cache.get(fetch) == "token-a"
    assert len(calls) == 1


async def test_token_inside_margin_is_refreshed():
    calls = []

    async def fetch():
        calls.append(1)
        return f"token-{len(calls)}", 30

    cache = BearerTokenCache(margin_seconds=60)
    await cache.get(fetch)
    assert await cache.get(fetch) == "token-2"


async def test_concurrent_callers_share_one_refresh():
    calls = []

    async def fetch():
        calls.append(1)
        await asyncio.sleep(0)
        return "shared", 1799

    cache = BearerTokenCache()
    tokens = await asyncio.gather(*(cache.get(fetch) for _ in range(5)))
    assert tokens == ["shared"] * 5
    assert len(calls) == 1


async def test_invalidate_forces_refresh():
    calls = []

    async def fetch():
        calls.append(1)
        return "t", 1799

    cache = BearerTokenCache()
    await cache.get(fetch)
    cache.invalidate()
    await cache.get(fetch)
    assert len(calls) == 2


# ─── Amadeus ───


def _amadeus(handler) -> AmadeusClient:
    return AmadeusClient(
        client_id="id",
        client_secret="secret",
        base_url=BASE_URL,
        token_cache=BearerTokenCache(),
        transport=httpx.MockTransport(handler),
    )


async def test_flight_search_retries_once_after_401():
    seen = {"tokens": 0, "searches": []}

    def handler(request: httpx.Request):
        if request.url.path == TOKEN_PATH:
            seen["tokens"] += 1
            return httpx.Response(200, json={"access_token": f"tok{seen['tokens']}", "expires_in": 1799})
        assert request.url.path == FLIGHT_OFFERS_PATH
        auth = request.headers["Authorization"]
        seen["searches"].append(auth)
        if auth == "Bearer tok1":
            return httpx.Response(401, json={"errors": [{"detail": "expired"}]})
        return httpx.Response(200, json={"data": [{"id": "1"}]})

    client = _amadeus(handler)
    offers = await client.search_flight_offers("DEL", "BOM", date(2025, 2, 1), 1, "ECONOMY", "INR")
    assert offers == [{"id": "1"}]
    assert seen["tokens"] == 2
    assert seen["searches"] == ["Bearer tok1", "Bearer tok2"]
    await client.close()


async def test_provider_error_detail_is_surfaced():
    def handler(request: httpx.Request):
        if request.url.path == TOKEN_PATH:
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 1799})
        return httpx.Response(400, json={"errors": [{"detail": "Invalid date"}]})

    client = _amadeus(handler)
    with pytest.raises(ProviderUnavailable) as exc:
        await client.search_flight_offers("DEL", "BOM", date(2025, 2, 1), 1, "ECONOMY", "INR")
    assert exc.value.detail == "Invalid date"
    await client.close()


async def test_transport_error_is_provider_unavailable():
    def handler(request: httpx.Request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = _amadeus(handler)
    with pytest.raises(ProviderUnavailable):
        await client.list_hotels_by_geocode(15.3, 74.1)
    await client.close()


async def test_non_object_response_is_provider_unavailable():
    def handler(request: httpx.Request):
        if request.url.path == TOKEN_PATH:
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 1799})
        return httpx.Response(200, json=[{"id": "1"}])

    client = _amadeus(handler)
    with pytest.raises(ProviderUnavailable):
        await client.search_flight_offers("DEL", "BOM", date(2025, 2, 1), 1, "ECONOMY", "INR")
    await client.close()


async def test_hotel_offers_batch_is_capped():
    seen = {}

    def handler(request: httpx.Request):
        if request.url.path == TOKEN_PATH:
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 1799})
        assert request.url.path == HOTEL_OFFERS_PATH
        seen["ids"] = request.url.params["hotelIds"].split(",")
        return httpx.Response(200, json={"data": []})

    client = _amadeus(handler)
    ids = [f"H{i}" for i in range(30)]
    result = await client.search_hotel_offers(ids, 2, date(2025, 1, 1), date(2025, 1, 3), 1, "USD")
    assert result == []
    assert len(seen["ids"]) == 20
    await client.close()


# ─── Currency ───


async def test_currency_identity_makes_no_call():
    def handler(request):
        raise AssertionError("no request expected")

    client = CurrencyClient(base_url="https://rates.test", transport=httpx.MockTransport(handler))
    assert await client.convert(42.0, "INR", "INR") == 42.0


async def test_currency_live_rate():
    def handler(request: httpx.Request):
        assert request.url.path.endswith("/latest/USD")
        return httpx.Response(200, json={"rates": {"INR": 80.0}})

    client = CurrencyClient(base_url="https://rates.test", transport=httpx.MockTransport(handler))
    assert await client.convert(10.0, "USD", "INR") == pytest.approx(800.0)
    await client.close()


async def test_currency_falls_back_to_static_table():
    def handler(request):
        return httpx.Response(503)

    client = CurrencyClient(base_url="https://rates.test", transport=httpx.MockTransport(handler))
    assert await client.convert(10.0, "USD", "INR") == pytest.approx(831.2)
    assert await client.convert(10.0, "CHF", "NOK") == 10.0
    await client.close()


@pytest.mark.parametrize("body", [b"null", b"[\"INR\", 80.0]", b"{\"rates\": null}", b"{\"rates\": [\"INR\"]}"])
async def test_currency_unexpected_payload_uses_static_table(body):
    def handler(request):
        return httpx.Response(200, content=body)

    client = CurrencyClient(base_url="https://rates.test", transport=httpx.MockTransport(handler))
    assert await client.convert(10.0, "USD", "INR") == pytest.approx(831.2)
    await client.close()


# ─── News ───


async def test_news_unconfigured_returns_none():
    client = NewsClient(api_key="")
    assert await client.search_recent("Goa") is None


async def test_news_query_and_window():
    seen = {}

    def handler(request: httpx.Request):
        seen.update(request.url.params)
        articles = [{"title": f"a{i}"} for i in range(15)]
        return httpx.Response(200, json={"status": "ok", "articles": articles})

    client = NewsClient(api_key="k", base_url="https://news.test", transport=httpx.MockTransport(handler))
    articles = await client.search_recent("Goa", today=date(2024, 11, 30))
    assert len(articles) == 10
    assert seen["q"] == build_query("Goa")
    assert seen["q"].startswith("Goa safety OR Goa travel")
    assert seen["from"] == "2024-10-31"
    assert seen["sortBy"] == "publishedAt"
    await client.close()


async def test_news_failure_and_empty_return_none():
    responses = iter([
        httpx.Response(500),
        httpx.Response(200, json={"articles": []}),
        httpx.Response(200, content=b"null"),
    ])

    def handler(request):
        return next(responses)

    client = NewsClient(api_key="k", base_url="https://news.test", transport=httpx.MockTransport(handler))
    for _ in range(3):
        assert await client.search_recent("Goa") is None
    await client.close()


# ─── LLM ───


class _FailingCompletions:
    async def create(self, **kwargs):
        raise RuntimeError("openai down")


class _Messages:
    def __init__(self, text=None):
        self.text = text

    async def create(self, **kwargs):
        if self.text is None:
            raise RuntimeError("anthropic down")
        return SimpleNamespace(content=[SimpleNamespace(text=self.text)])


async def test_llm_without_keys_raises_credential_missing():
    client = LLMClient(openai_api_key="", anthropic_api_key="")
    assert not client.is_configured
    with pytest.raises(CredentialMissingError):
        await client.complete("system", "user")


async def test_llm_falls_back_to_anthropic():
    client = LLMClient(openai_api_key="", anthropic_api_key="")
    client._openai = SimpleNamespace(chat=SimpleNamespace(completions=_FailingCompletions()))
    client._anthropic = SimpleNamespace(messages=_Messages("  {\"ok\": true}  "))
    assert await client.complete("system", "user") == '{"ok": true}'


async def test_llm_all_providers_failing_is_unavailable():
    client = LLMClient(openai_api_key="", anthropic_api_key="")
    client._openai = SimpleNamespace(chat=SimpleNamespace(completions=_FailingCompletions()))
    client._anthropic = SimpleNamespace(messages=_Messages())
    with pytest.raises(ProviderUnavailable):
        await client.complete("system", "user")
