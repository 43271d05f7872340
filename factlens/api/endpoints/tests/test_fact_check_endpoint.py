"""tests for the text fact-check and articles endpoints.

covers:
- blank or missing content returns 400 without invoking the pipeline
- success returns the camelCase NormalizedResponse on both routes
- pipeline errors render as {"error": message}
- articles query parameters reach the provider; missing key is a 500
- malformed bodies and query params return 400 {"error": message}, never 422
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from factlens.api.dependencies import get_claim_search, get_pipeline
from factlens.config.settings import Settings
from factlens.main import create_app
from factlens.models import (
    AISummary,
    ClaimReview,
    Consensus,
    FactCheckProcessingFailed,
    NormalizedResponse,
    ProviderCallFailed,
    ProviderUnavailable,
    ReviewVerdict,
)


# ---- helpers ----

def _make_response() -> NormalizedResponse:
    claim = ClaimReview(
        source_claim_id="claim-0",
        claim_text="The moon landing was faked",
        reviews=[ReviewVerdict(publisher_name="PolitiFact", textual_rating="False", url="https://politifact.test")],
    )
    return NormalizedResponse.build(
        ai_summary=AISummary(
            overview="PolitiFact rated the claim False.",
            consensus=Consensus.STRONG,
            conclusion="The moon landing was not faked.",
        ),
        labels=["conspiracy"],
        claim_reviews=[claim],
        initial_claim_analysis="This claim is likely **false** (confidence: 91.2%).",
        initial_claim_categorization="Categorized as: conspiracy (confidence: 88.0%)",
    )


@pytest.fixture
def pipeline():
    mock = MagicMock()
    mock.run_text_fact_check = AsyncMock(return_value=_make_response())
    return mock


@pytest.fixture
def claim_search():
    mock = MagicMock()
    mock.language_code = "en-US"
    mock.search_raw = AsyncMock(return_value={"claims": [{"text": "Vaccines contain microchips"}]})
    return mock


@pytest.fixture
def client(pipeline, claim_search):
    app = create_app(Settings())
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    app.dependency_overrides[get_claim_search] = lambda: claim_search
    return TestClient(app)


# ---- text fact-check ----

@pytest.mark.parametrize("body", [{"content": ""}, {"content": "   "}, {}, None])
def test_blank_content_returns_400(client, pipeline, body):
    response = client.post("/api/fact-check", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Content is required."}
    pipeline.run_text_fact_check.assert_not_called()


@pytest.mark.parametrize("route", ["/api/fact-check", "/api/fact-check/fact-check"])
def test_success_returns_normalized_response(client, pipeline, route):
    response = client.post(route, json={"content": "the moon landing was faked"})

    assert response.status_code == 200
    body = response.json()
    assert body["summary"]["claimReviewCount"] == 1
    assert body["summary"]["consensus"] == "Strong Consensus"
    assert body["summary"]["labels"] == ["conspiracy"]
    assert body["data"]["initialClaimAnalysis"].startswith("This claim is likely **false**")
    assert body["data"]["factCheckResults"][0]["sourceClaimId"] == "claim-0"
    assert body["data"]["factCheckResults"][0]["reviews"][0]["publisherName"] == "PolitiFact"
    assert pipeline.run_text_fact_check.call_args.args[0] == "the moon landing was faked"


def test_pipeline_failure_returns_500_with_message(client, pipeline):
    pipeline.run_text_fact_check.side_effect = FactCheckProcessingFailed("Failed to process fact check request.")

    response = client.post("/api/fact-check", json={"content": "claim"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process fact check request."}


def test_missing_provider_key_is_explained(client, pipeline):
    pipeline.run_text_fact_check.side_effect = ProviderUnavailable(
        "Google API Key not set. Please configure GOOGLE_API_KEY in .env"
    )

    response = client.post("/api/fact-check", json={"content": "claim"})

    assert response.status_code == 500
    assert "GOOGLE_API_KEY" in response.json()["error"]


def test_unexpected_error_is_not_exposed(client, pipeline):
    pipeline.run_text_fact_check.side_effect = RuntimeError("secret internal detail")

    response = client.post("/api/fact-check", json={"content": "claim"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process fact check request."}


# ---- articles ----

def test_articles_forwards_query_and_token(client, claim_search):
    response = client.get(
        "/api/fact-check/articles",
        params={"query": "vaccines", "category": "health", "page": 2, "limit": 5, "pageToken": "tok"},
    )

    assert response.status_code == 200
    params = claim_search.search_raw.call_args.args[0]
    assert params["query"] == "health vaccines"
    assert params["pageSize"] == 5
    assert params["pageToken"] == "tok"
    body = response.json()
    assert body["pagination"]["currentPage"] == 2
    assert body["totalResults"] == 1
    assert body["articles"][0]["category"] == "health"
    assert body["articles"][0]["imageUrl"] is None


def test_articles_without_key_returns_500(client, claim_search):
    claim_search.search_raw.side_effect = ProviderUnavailable(
        "Google API Key not set. Please configure GOOGLE_API_KEY in .env"
    )

    response = client.get("/api/fact-check/articles")

    assert response.status_code == 500
    assert "GOOGLE_API_KEY" in response.json()["error"]


# ---- service ----

def test_root_and_health(client):
    assert client.get("/").text == "All are ok"
    assert client.get("/health").json() == {"status": "healthy"}


def test_articles_provider_failure_returns_500(client, claim_search):
    claim_search.search_raw.side_effect = ProviderCallFailed("google_fact_check", "unreadable response")

    response = client.get("/api/fact-check/articles")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch fact-check articles."}


# ---- request validation ----

@pytest.mark.parametrize("route", ["/api/fact-check", "/api/fact-check/fact-check"])
def test_non_string_content_returns_400(client, pipeline, route):
    response = client.post(route, json={"content": 123})

    assert response.status_code == 400
    assert response.json() == {"error": "Content is required."}
    pipeline.run_text_fact_check.assert_not_called()


def test_malformed_json_returns_400(client, pipeline):
    response = client.post(
        "/api/fact-check",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Content is required."}
    pipeline.run_text_fact_check.assert_not_called()


@pytest.mark.parametrize("params", [{"page": "abc"}, {"page": 0}, {"limit": 500}])
def test_articles_invalid_params_return_400(client, claim_search, params):
    response = client.get("/api/fact-check/articles", params=params)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request parameters."}
    claim_search.search_raw.assert_not_called()
