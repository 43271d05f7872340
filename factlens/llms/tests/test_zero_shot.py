"""tests for the zero-shot classification client."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from factlens.llms.zero_shot import HuggingFaceZeroShotClassifier, parse_zero_shot_response
from factlens.models import ProviderCallFailed, ProviderUnavailable

CLIENT_PATH = "factlens.llms.zero_shot.httpx.AsyncClient"


def test_parse_labels_scores_layout():
    result = parse_zero_shot_response({
        "sequence": "the moon landing was faked",
        "labels": ["false", "misleading", "true"],
        "scores": [0.912, 0.06, 0.028],
    })
    assert result.top() == ("false", 0.912)


def test_parse_list_layout_is_sorted():
    result = parse_zero_shot_response([
        {"label": "politics", "score": 0.1},
        {"label": "conspiracy", "score": 0.88},
        {"label": "science", "score": 0.02},
    ])
    assert result.labels == ["conspiracy", "politics", "science"]
    assert result.top() == ("conspiracy", 0.88)


@pytest.mark.parametrize("data", [{}, [], {"error": "Model is loading"}, "oops"])
def test_parse_rejects_unusable_bodies(data):
    with pytest.raises(ValueError):
        parse_zero_shot_response(data)


def test_url_joins_base_and_model():
    classifier = HuggingFaceZeroShotClassifier(
        api_key="k", model_name="facebook/bart-large-mnli", base_url="https://hf.test/models/"
    )
    assert classifier.url == "https://hf.test/models/facebook/bart-large-mnli"


@pytest.mark.asyncio
async def test_classify_without_key_raises():
    with pytest.raises(ProviderUnavailable):
        await HuggingFaceZeroShotClassifier(api_key=None).classify("text", ["true", "false"])


@pytest.mark.asyncio
async def test_classify_posts_candidate_labels():
    response = MagicMock()
    response.json.return_value = {"labels": ["true", "false"], "scores": [0.7, 0.3]}
    response.raise_for_status = MagicMock()

    with patch(CLIENT_PATH) as mock_client_cls:
        mock_client = AsyncMock()
        mock_client.post = AsyncMock(return_value=response)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        mock_client_cls.return_value = mock_client

        classifier = HuggingFaceZeroShotClassifier(api_key="hf_test")
        result = await classifier.classify("water is wet", ["true", "false"])

        assert result.top() == ("true", 0.7)
        kwargs = mock_client.post.call_args.kwargs
        assert kwargs["json"] == {
            "inputs": "water is wet",
            "parameters": {"candidate_labels": ["true", "false"]},
        }
        assert kwargs["headers"]["Authorization"] == "Bearer hf_test"


@pytest.mark.asyncio
async def test_classify_unreadable_body_raises_provider_call_failed():
    response = MagicMock()
    response.json.return_value = {"error": "Model facebook/bart-large-mnli is currently loading"}
    response.raise_for_status = MagicMock()

    with patch(CLIENT_PATH) as mock_client_cls:
        mock_client = AsyncMock()
        mock_client.post = AsyncMock(return_value=response)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        mock_client_cls.return_value = mock_client

        with pytest.raises(ProviderCallFailed, match="huggingface"):
            await HuggingFaceZeroShotClassifier(api_key="hf_test").classify("x", ["true"])
