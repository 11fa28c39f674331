"""Unit tests for the api-adresse.data.gouv.fr client."""

import httpx
import pytest

from app.adapters.outbound.address.api_adresse_client import ApiAdresseClient
from app.application.ports.address_lookup_client import AddressLookupClient

SEARCH_RESPONSE = {
    "type": "FeatureCollection",
    "features": [
        {
            "properties": {
                "label": "Dijon",
                "postcode": "21000",
                "city": "Dijon",
                "context": "21, Côte-d'Or, Bourgogne-Franche-Comté",
            }
        },
        {"properties": {"postcode": "21800", "municipality": "Quetigny"}},
        {"properties": {}},
        "garbage",
    ],
}


def _client(handler) -> ApiAdresseClient:
    return ApiAdresseClient(
        base_url="https://api.test",
        timeout_seconds=1,
        transport=httpx.MockTransport(handler),
    )


def test_implements_port():
    """Test that the adapter implements the AddressLookupClient port."""
    assert isinstance(_client(lambda request: httpx.Response(200, json={})), AddressLookupClient)


@pytest.mark.asyncio
async def test_search_maps_features():
    """Test candidate mapping and filtering."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=SEARCH_RESPONSE)

    results = await _client(handler).search(" Dij ", limit=6)

    assert [r.city for r in results] == ["Dijon", "Quetigny"]
    assert results[1].label == "21800 Quetigny"
    assert results[0].context.startswith("21")
    params = requests[0].url.params
    assert requests[0].url.path == "/search/"
    assert params["q"] == "Dij"
    assert params["limit"] == "6"
    assert params["autocomplete"] == "1"


@pytest.mark.asyncio
async def test_search_short_query_skips_network():
    """Test minimum query length."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=SEARCH_RESPONSE)

    assert await _client(handler).search("d") == []
    assert calls == []


@pytest.mark.asyncio
async def test_search_http_error_returns_empty():
    """Test degraded lookup on server error."""
    results = await _client(lambda request: httpx.Response(503)).search("Dijon")
    assert results == []


@pytest.mark.asyncio
async def test_search_malformed_json_returns_empty():
    """Test degraded lookup on parse error."""
    results = await _client(lambda request: httpx.Response(200, content=b"<html>")).search("Dijon")
    assert results == []


@pytest.mark.asyncio
async def test_search_transport_error_returns_empty():
    """Test degraded lookup on network failure."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    assert await _client(handler).search("Dijon") == []


@pytest.mark.asyncio
async def test_reverse_returns_first_feature():
    """Test reverse lookup."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=SEARCH_RESPONSE)

    candidate = await _client(handler).reverse(47.32, 5.04)

    assert candidate is not None
    assert candidate.postcode == "21000"
    assert requests[0].url.path == "/reverse/"
    assert requests[0].url.params["limit"] == "1"


@pytest.mark.asyncio
async def test_reverse_empty_response_returns_none():
    """Test reverse lookup without features."""
    candidate = await _client(lambda request: httpx.Response(200, json={"features": []})).reverse(
        0.0, 0.0
    )
    assert candidate is None


@pytest.mark.asyncio
async def test_search_malformed_properties_are_skipped():
    """Test that non-object properties never break the lookup."""
    body = {
        "features": [
            {"properties": ["x"]},
            {"properties": {"postcode": 21000, "city": ["Dijon"], "label": None}},
            {"properties": {"postcode": "21800", "city": "Quetigny"}},
        ]
    }

    results = await _client(lambda request: httpx.Response(200, json=body)).search("Dijon")

    assert [r.label for r in results] == ["21000", "21800 Quetigny"]


@pytest.mark.asyncio
async def test_reverse_malformed_feature_returns_none():
    """Test reverse lookup on a non-object feature list."""
    body = {"features": [{"properties": "Dijon"}]}

    candidate = await _client(lambda request: httpx.Response(200, json=body)).reverse(47.3, 5.0)

    assert candidate is None
