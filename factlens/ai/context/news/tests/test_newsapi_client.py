"""tests for the news provider client."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from factlens.ai.context.protocols import NewsProviderProtocol
from factlens.ai.context.news.newsapi_client import NewsApiClient
from factlens.models import ProviderCallFailed, ProviderUnavailable

CLIENT_PATH = "factlens.ai.context.news.newsapi_client.httpx.AsyncClient"


def _mock_http(mock_client_cls, response):
    mock_client = AsyncMock()
    mock_client.get = AsyncMock(return_value=response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_client
    return mock_client


def test_build_request_category():
    url, params = NewsApiClient(api_key="k").build_request(category="health")
    assert url.endswith("/top-headlines")
    assert params == {"country": "us", "category": "health"}


def test_build_request_keyword():
    url, params = NewsApiClient(api_key="k").build_request(keyword="vaccines")
    assert url.endswith("/everything")
    assert params["q"] == "vaccines"
    assert params["language"] == "en"
    assert params["sortBy"] == "publishedAt"
    assert params["pageSize"] == 20


def test_build_request_defaults_to_general_headlines():
    url, params = NewsApiClient(api_key="k").build_request()
    assert url.endswith("/top-headlines")
    assert params["category"] == "general"


@pytest.mark.asyncio
async def test_fetch_without_key_raises():
    with pytest.raises(ProviderUnavailable, match="News API key is not configured on the server."):
        await NewsApiClient(api_key=None).fetch(category="health")


@pytest.mark.asyncio
async def test_fetch_passes_body_through():
    body = {"status": "ok", "totalResults": 1, "articles": [{"title": "Headline"}]}
    response = MagicMock()
    response.json.return_value = body
    response.raise_for_status = MagicMock()

    with patch(CLIENT_PATH) as mock_client_cls:
        mock_client = _mock_http(mock_client_cls, response)

        result = await NewsApiClient(api_key="news-key").fetch(keyword="moon")

        assert result == body
        assert mock_client.get.call_args.kwargs["params"]["apiKey"] == "news-key"


@pytest.mark.asyncio
async def test_fetch_http_error_uses_provider_message():
    request = httpx.Request("GET", "https://newsapi.org/v2/top-headlines")
    error_response = httpx.Response(
        401, request=request, json={"status": "error", "message": "Your API key is invalid."}
    )
    response = MagicMock()
    response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError("unauthorized", request=request, response=error_response)
    )

    with patch(CLIENT_PATH) as mock_client_cls:
        _mock_http(mock_client_cls, response)

        with pytest.raises(ProviderCallFailed, match="Your API key is invalid."):
            await NewsApiClient(api_key="bad").fetch()


@pytest.mark.asyncio
async def test_fetch_non_json_body_raises_provider_call_failed():
    request = httpx.Request("GET", "https://newsapi.org/v2/top-headlines")
    response = httpx.Response(200, request=request, text="<html>upstream proxy error</html>")

    with patch(CLIENT_PATH) as mock_client_cls:
        _mock_http(mock_client_cls, response)

        with pytest.raises(ProviderCallFailed, match="unreadable response"):
            await NewsApiClient(api_key="news-key").fetch()


def test_client_satisfies_news_provider_protocol():
    assert isinstance(NewsApiClient(api_key="k"), NewsProviderProtocol)
