"""
Hugging Face inference API client for zero-shot classification.

Posts the text and a candidate label set to an NLI model
(facebook/bart-large-mnli by default) and returns the labels ranked by score.
Both response layouts the inference API has used are accepted:
- {"sequence": ..., "labels": [...], "scores": [...]}
- [{"label": ..., "score": ...}, ...]
"""

from typing import Any, List, Optional

import httpx

from factlens.models import ZeroShotResult, ProviderCallFailed, ProviderUnavailable
from factlens.observability.logger import get_logger, PipelineStep

logger = get_logger(__name__, PipelineStep.CLAIM_ANALYSIS)

PROVIDER = "huggingface"
DEFAULT_MODEL = "facebook/bart-large-mnli"
DEFAULT_BASE_URL = "https://api-inference.huggingface.co/models"


def parse_zero_shot_response(data: Any) -> ZeroShotResult:
    """normalize either response layout into labels/scores sorted by score"""
    if isinstance(data, dict) and "labels" in data and "scores" in data:
        pairs = list(zip(data["labels"], data["scores"]))
    elif isinstance(data, list) and all(isinstance(item, dict) for item in data):
        pairs = [(item["label"], item["score"]) for item in data]
    else:
        raise ValueError(f"unexpected zero-shot response: {str(data)[:200]}")

    if not pairs:
        raise ValueError("zero-shot response has no labels")

    pairs.sort(key=lambda pair: pair[1], reverse=True)
    return ZeroShotResult(
        labels=[label for label, _ in pairs],
        scores=[float(score) for _, score in pairs],
    )


class HuggingFaceZeroShotClassifier:
    """
    zero-shot classification over the Hugging Face inference API.

    Example:
        >>> classifier = HuggingFaceZeroShotClassifier(api_key="hf_...")
        >>> result = await classifier.classify("the moon landing was faked", ["true", "false", "misleading"])
        >>> result.top()
        ('false', 0.912)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 20.0
    ):
        self.api_key = api_key or ""
        self.model_name = model_name
        self.url = f"{base_url.rstrip('/')}/{model_name}"
        self.timeout = timeout

    async def classify(self, text: str, candidate_labels: List[str]) -> ZeroShotResult:
        """
        raises:
            ProviderUnavailable: HF_API_KEY not set
            ProviderCallFailed: transport error, non-2xx status or unreadable body
        """
        if not self.api_key:
            raise ProviderUnavailable("Hugging Face API key not set. Please configure HF_API_KEY.")

        payload = {
            "inputs": text,
            "parameters": {"candidate_labels": candidate_labels},
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = f"{e.response.status_code}: {e.response.text[:200]}"
            logger.error(f"zero-shot request failed: {detail}")
            raise ProviderCallFailed(PROVIDER, detail) from e
        except httpx.HTTPError as e:
            logger.error(f"zero-shot request failed: {type(e).__name__}: {e}")
            raise ProviderCallFailed(PROVIDER, str(e) or type(e).__name__) from e

        try:
            return parse_zero_shot_response(response.json())
        except (ValueError, KeyError, TypeError) as e:
            raise ProviderCallFailed(PROVIDER, f"unreadable response: {e}") from e
