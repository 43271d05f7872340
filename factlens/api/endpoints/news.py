from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from factlens.ai.context.protocols import NewsProviderProtocol
from factlens.api.dependencies import get_news_client
from factlens.api.endpoints.fact_check import ERROR_RESPONSES
from factlens.models import FactCheckProcessingFailed, ProviderCallFailed
from factlens.observability.logger import get_logger, PipelineStep

router = APIRouter()
logger = get_logger(__name__, PipelineStep.NEWS)


@router.get("/news", responses=ERROR_RESPONSES)
@router.get("/fact-check/news", responses=ERROR_RESPONSES)
async def get_news(
    category: Optional[str] = None,
    q: Optional[str] = None,
    news_client: NewsProviderProtocol = Depends(get_news_client),
) -> Dict[str, Any]:
    """
    Latest news, by category or keyword; the provider response is returned as is.
    """
    logger.info(f"news request: category={category!r} q={q!r}")
    try:
        return await news_client.fetch(category=category, keyword=q)
    except ProviderCallFailed as e:
        raise FactCheckProcessingFailed("Failed to fetch news articles.") from e
