"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from fridge_insights.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from fridge_insights.adapters.openai_chat_client import OpenAIChatClient
from fridge_insights.errors import UpstreamError


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str = "Use the milk first.") -> None:
        self.responses = _FakeResponses(output_text)


def test_openai_chat_client_returns_output_text() -> None:
    fake = _FakeOpenAI()
    client = OpenAIChatClient(client=fake, model="gpt-4o-mini")
    messages = [{"role": "user", "content": "What should I cook?"}]

    reply = asyncio.run(client.complete(messages, temperature=0.7))

    assert reply == "Use the milk first."
    assert fake.responses.last_payload == {
        "model": "gpt-4o-mini",
        "input": messages,
        "temperature": 0.7,
        "store": False,
    }


def test_openai_chat_client_rejects_empty_output() -> None:
    client = OpenAIChatClient(client=_FakeOpenAI(output_text=""), model="m")

    with pytest.raises(UpstreamError):
        asyncio.run(client.complete([{"role": "user", "content": "hi"}], 0.2))


def test_open_food_facts_client_fetches_product() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v0/product/737628064502.json"
        return httpx.Response(
            200, json={"status": 1, "product": {"product_name": "Noodles"}}
        )

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxOpenFoodFactsClient(
        base_url="https://world.openfoodfacts.test/api/v0",
        http_client=async_client,
    )

    payload = asyncio.run(client.fetch_product("737628064502"))

    assert payload["product"] == {"product_name": "Noodles"}


def test_open_food_facts_client_maps_404_to_missing_product() -> None:
    transport = httpx.MockTransport(lambda _request: httpx.Response(404))
    client = HttpxOpenFoodFactsClient(
        base_url="https://world.openfoodfacts.test/api/v0",
        http_client=httpx.AsyncClient(transport=transport),
    )

    assert asyncio.run(client.fetch_product("000")) == {"status": 0}


def test_open_food_facts_client_raises_on_server_error() -> None:
    transport = httpx.MockTransport(lambda _request: httpx.Response(503))
    client = HttpxOpenFoodFactsClient(
        base_url="https://world.openfoodfacts.test/api/v0",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.fetch_product("000"))
