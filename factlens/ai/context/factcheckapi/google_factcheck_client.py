"""
Google Fact Check Tools client (claim-review provider).

Searches the `claims:search` endpoint and turns the response into ClaimReview
models. Unlike a best-effort evidence source, a failed search is an error for
the caller: network errors, timeouts and non-2xx answers raise
ProviderCallFailed, and a missing API key raises ProviderUnavailable.

API Documentation:
https://developers.google.com/fact-check/tools/api/reference/rest/v1alpha1/claims/search
"""

import os
from typing import Any, Dict, List, Optional

import httpx

from factlens.models import (
    ClaimReview,
    ReviewVerdict,
    ProviderCallFailed,
    ProviderUnavailable,
)
from factlens.observability.logger import get_logger, PipelineStep

logger = get_logger(__name__, PipelineStep.CLAIM_REVIEW_SEARCH)

BASE_URL = "https://factchecktools.googleapis.com/v1alpha1/claims:search"
PROVIDER = "google_fact_check"
MISSING_KEY_MESSAGE = "Google API Key not set. Please configure GOOGLE_API_KEY in .env"


class GoogleFactCheckClient:
    """
    claim-review search against the Google Fact Check Tools API.

    Example:
        >>> client = GoogleFactCheckClient(api_key="your_key")
        >>> reviews = await client.search("the moon landing was faked")
        >>> reviews[0].reviews[0].textual_rating
        'False'
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        language_code: str = "en-US",
        timeout: float = 15.0
    ):
        self.api_key = api_key if api_key is not None else os.getenv("GOOGLE_API_KEY", "")
        self.language_code = language_code
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def search(self, query: str) -> List[ClaimReview]:
        """return every claim the provider has reviews for, in provider order"""
        data = await self.search_raw({"query": query, "languageCode": self.language_code})
        reviews = self._parse_response(data)
        logger.info(f"claim-review search returned {len(reviews)} claim(s) for query '{query[:80]}'")
        return reviews

    async def search_raw(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        call claims:search with `params` and return the decoded JSON body.

        raises:
            ProviderUnavailable: no API key configured
            ProviderCallFailed: timeout, transport error, non-2xx status or non-JSON body
        """
        if not self.is_configured:
            raise ProviderUnavailable(MISSING_KEY_MESSAGE)

        request_params = {k: v for k, v in params.items() if v is not None}
        request_params["key"] = self.api_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(BASE_URL, params=request_params)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"fact check api timeout after {self.timeout}s")
            raise ProviderCallFailed(PROVIDER, f"timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"fact check api http error {status}: {e.response.text[:300]}")
            if status == 404:
                logger.error("check if the Fact Check Tools API is enabled in the Google Cloud console")
            raise ProviderCallFailed(PROVIDER, f"http error {status}") from e
        except httpx.RequestError as e:
            logger.error(f"fact check api request error: {e}")
            raise ProviderCallFailed(PROVIDER, f"request error: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"fact check api returned an unreadable body: {response.text[:200]}")
            raise ProviderCallFailed(PROVIDER, "unreadable response") from e

    def _parse_response(self, data: Dict[str, Any]) -> List[ClaimReview]:
        """parse a claims:search body into ClaimReview models"""
        claims = data.get("claims") or []
        return [
            self._parse_claim(index, claim_data)
            for index, claim_data in enumerate(claims)
        ]

    def _parse_claim(self, index: int, claim_data: Dict[str, Any]) -> ClaimReview:
        verdicts: List[ReviewVerdict] = []

        for review in claim_data.get("claimReview", []):
            publisher = review.get("publisher") or {}
            verdicts.append(
                ReviewVerdict(
                    publisher_name=publisher.get("name") or publisher.get("site") or "Unknown Publisher",
                    publisher_site=publisher.get("site"),
                    textual_rating=review.get("textualRating", ""),
                    url=review.get("url") or None,
                    title=review.get("title"),
                    review_date=review.get("reviewDate"),
                    language_code=review.get("languageCode"),
                )
            )

        return ClaimReview(
            source_claim_id=claim_data.get("name") or f"claim-{index}",
            claim_text=claim_data.get("text", ""),
            claimant=claim_data.get("claimant"),
            claim_date=claim_data.get("claimDate"),
            reviews=verdicts,
        )
