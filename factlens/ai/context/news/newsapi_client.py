"""
NewsAPI client (news provider).

The response body is passed through untouched; callers get exactly what
newsapi.org returns.
"""

from typing import Any, Dict, Optional

import httpx

from factlens.models import ProviderCallFailed, ProviderUnavailable
from factlens.observability.logger import get_logger, PipelineStep

logger = get_logger(__name__, PipelineStep.NEWS)

BASE_URL = "https://newsapi.org/v2"
PROVIDER = "newsapi"
MISSING_KEY_MESSAGE = "News API key is not configured on the server."


class NewsApiClient:
    """
    top headlines by category, or everything matching a keyword.

    Example:
        >>> client = NewsApiClient(api_key="your_key")
        >>> data = await client.fetch(category="health")
        >>> data["status"]
        'ok'
    """

    def __init__(self, api_key: Optional[str] = None, timeout: float = 15.0):
        self.api_key = api_key or ""
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_request(
        self,
        category: Optional[str] = None,
        keyword: Optional[str] = None
    ) -> tuple[str, Dict[str, Any]]:
        """category wins over keyword; neither means general top headlines"""
        if category:
            return f"{BASE_URL}/top-headlines", {"country": "us", "category": category}
        if keyword:
            return f"{BASE_URL}/everything", {
                "q": keyword,
                "language": "en",
                "sortBy": "publishedAt",
                "pageSize": 20,
            }
        return f"{BASE_URL}/top-headlines", {"country": "us", "category": "general"}

    async def fetch(
        self,
        category: Optional[str] = None,
        keyword: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        raises:
            ProviderUnavailable: NEWS_API_KEY not set
            ProviderCallFailed: timeout, transport error, non-2xx status or non-JSON body
        """
        if not self.is_configured:
            raise ProviderUnavailable(MISSING_KEY_MESSAGE)

        url, params = self.build_request(category, keyword)
        params["apiKey"] = self.api_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # newsapi puts the reason in a JSON "message" field
            try:
                reason = e.response.json().get("message", e.response.text[:200])
            except ValueError:
                reason = e.response.text[:200]
            logger.error(f"error fetching from NewsAPI: {e.response.status_code} {reason}")
            raise ProviderCallFailed(PROVIDER, reason) from e
        except httpx.HTTPError as e:
            logger.error(f"error fetching from NewsAPI: {type(e).__name__}: {e}")
            raise ProviderCallFailed(PROVIDER, str(e) or type(e).__name__) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"NewsAPI returned an unreadable body: {response.text[:200]}")
            raise ProviderCallFailed(PROVIDER, "unreadable response") from e
