"""tests for the claim-review provider client."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from factlens.ai.context.factcheckapi.google_factcheck_client import GoogleFactCheckClient
from factlens.models import ProviderCallFailed, ProviderUnavailable

CLIENT_PATH = "factlens.ai.context.factcheckapi.google_factcheck_client.httpx.AsyncClient"


@pytest.fixture
def client():
    return GoogleFactCheckClient(api_key="test-key", timeout=10.0)


def _mock_http(mock_client_cls, response=None, side_effect=None):
    mock_client = AsyncMock()
    mock_client.get = AsyncMock(return_value=response, side_effect=side_effect)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_client
    return mock_client


def _ok_response(body):
    response = MagicMock()
    response.json.return_value = body
    response.raise_for_status = MagicMock()
    return response


MOON_LANDING = {
    "claims": [
        {
            "text": "The moon landing was faked",
            "claimant": "Social media users",
            "claimDate": "2023-07-20T00:00:00Z",
            "claimReview": [
                {
                    "publisher": {"name": "PolitiFact", "site": "politifact.com"},
                    "url": "https://www.politifact.com/moon",
                    "title": "No, the moon landing was not staged",
                    "reviewDate": "2023-07-21T00:00:00Z",
                    "textualRating": "False",
                    "languageCode": "en",
                }
            ],
        }
    ]
}


def test_parse_response_with_claims(client):
    results = client._parse_response(MOON_LANDING)
    assert len(results) == 1
    claim = results[0]
    assert claim.source_claim_id == "claim-0"
    assert claim.claim_text == "The moon landing was faked"
    assert claim.claimant == "Social media users"
    assert claim.reviews[0].publisher_name == "PolitiFact"
    assert claim.reviews[0].publisher_site == "politifact.com"
    assert claim.reviews[0].textual_rating == "False"


def test_parse_response_uses_provider_name_as_id(client):
    data = {"claims": [{"name": "claims/abc123", "text": "x", "claimReview": []}]}
    assert client._parse_response(data)[0].source_claim_id == "claims/abc123"


def test_parse_response_empty(client):
    assert client._parse_response({}) == []
    assert client._parse_response({"claims": []}) == []


def test_parse_response_keeps_review_without_url(client):
    data = {
        "claims": [
            {
                "text": "claim",
                "claimReview": [
                    {"url": "", "publisher": {"name": "Pub"}, "textualRating": "False"},
                    {"url": "https://ok.test", "publisher": {}, "textualRating": "True"},
                ],
            }
        ]
    }
    reviews = client._parse_response(data)[0].reviews
    assert len(reviews) == 2
    assert reviews[0].url is None
    assert reviews[0].publisher_name == "Pub"
    assert reviews[0].textual_rating == "False"
    assert reviews[1].url == "https://ok.test"
    assert reviews[1].publisher_name == "Unknown Publisher"


def test_claim_review_serializes_camel_case(client):
    dumped = client._parse_response(MOON_LANDING)[0].model_dump(by_alias=True)
    assert "sourceClaimId" in dumped
    assert "claimText" in dumped
    assert "publisherName" in dumped["reviews"][0]
    assert "textualRating" in dumped["reviews"][0]


@pytest.mark.asyncio
async def test_search_raises_when_api_key_missing():
    client = GoogleFactCheckClient(api_key="")
    assert not client.is_configured
    with pytest.raises(ProviderUnavailable, match="GOOGLE_API_KEY"):
        await client.search("anything")


@pytest.mark.asyncio
async def test_search_sends_query_language_and_key(client):
    with patch(CLIENT_PATH) as mock_client_cls:
        mock_client = _mock_http(mock_client_cls, response=_ok_response(MOON_LANDING))

        results = await client.search("the moon landing was faked")

        assert len(results) == 1
        params = mock_client.get.call_args.kwargs["params"]
        assert params == {
            "query": "the moon landing was faked",
            "languageCode": "en-US",
            "key": "test-key",
        }


@pytest.mark.asyncio
async def test_search_raw_drops_none_params(client):
    with patch(CLIENT_PATH) as mock_client_cls:
        mock_client = _mock_http(mock_client_cls, response=_ok_response({}))

        await client.search_raw({"query": "q", "pageToken": None})

        params = mock_client.get.call_args.kwargs["params"]
        assert "pageToken" not in params


@pytest.mark.asyncio
async def test_search_timeout_raises_provider_call_failed(client):
    with patch(CLIENT_PATH) as mock_client_cls:
        _mock_http(mock_client_cls, side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(ProviderCallFailed, match="timeout"):
            await client.search("q")


@pytest.mark.asyncio
async def test_search_http_error_raises_provider_call_failed(client):
    request = httpx.Request("GET", "https://factchecktools.googleapis.com/v1alpha1/claims:search")
    error_response = httpx.Response(403, request=request, text="forbidden")
    response = MagicMock()
    response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError("forbidden", request=request, response=error_response)
    )

    with patch(CLIENT_PATH) as mock_client_cls:
        _mock_http(mock_client_cls, response=response)

        with pytest.raises(ProviderCallFailed, match="403"):
            await client.search("q")


@pytest.mark.asyncio
async def test_search_non_json_body_raises_provider_call_failed(client):
    request = httpx.Request("GET", "https://factchecktools.googleapis.com/v1alpha1/claims:search")
    response = httpx.Response(200, request=request, text="<html>Service Unavailable</html>")

    with patch(CLIENT_PATH) as mock_client_cls:
        _mock_http(mock_client_cls, response=response)

        with pytest.raises(ProviderCallFailed, match="unreadable response"):
            await client.search("q")
