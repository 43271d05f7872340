import time
from typing import Optional

from fastapi import APIRouter, Depends, Query

from factlens.ai.context.factcheckapi import GoogleFactCheckClient, list_articles
from factlens.ai.main_pipeline import CONTENT_REQUIRED_MESSAGE, TEXT_FAILURE_MESSAGE, FactCheckPipeline
from factlens.api.dependencies import get_claim_search, get_pipeline
from factlens.models import (
    ArticlesPage,
    ErrorResponse,
    FactCheckError,
    FactCheckProcessingFailed,
    FactCheckRequest,
    InvalidInput,
    NormalizedResponse,
)
from factlens.observability.logger import get_request_logger, PipelineStep
from factlens.utils.id_generator import generate_request_id

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post("/fact-check", response_model=NormalizedResponse, responses=ERROR_RESPONSES)
@router.post("/fact-check/fact-check", response_model=NormalizedResponse, responses=ERROR_RESPONSES)
async def fact_check_text(
    request: Optional[FactCheckRequest] = None,
    pipeline: FactCheckPipeline = Depends(get_pipeline),
) -> NormalizedResponse:
    """
    Fact-check a free-text claim.

    Searches published fact-checks for the claim, classifies its likely veracity
    and topic, and summarizes what the fact-checkers concluded.
    """
    start_time = time.time()
    request_id = generate_request_id()
    logger = get_request_logger(__name__, PipelineStep.API_INTAKE, request_id)

    content = (request.content if request else None) or ""
    if not content.strip():
        logger.info("rejected text request: empty content")
        raise InvalidInput(CONTENT_REQUIRED_MESSAGE)

    logger.info(f"received text fact-check request ({len(content)} chars)")
    logger.debug(f"content preview: '{content[:100]}'")

    try:
        response = await pipeline.run_text_fact_check(content, request_id=request_id)
    except FactCheckError as e:
        total_duration = (time.time() - start_time) * 1000
        logger.error(f"request failed after {total_duration:.0f}ms: {type(e).__name__}: {e.message}")
        raise
    except Exception as e:
        total_duration = (time.time() - start_time) * 1000
        logger.error(
            f"request failed after {total_duration:.0f}ms: {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise FactCheckProcessingFailed(TEXT_FAILURE_MESSAGE) from e

    total_duration = (time.time() - start_time) * 1000
    logger.info(
        f"request completed in {total_duration:.0f}ms: "
        f"{response.summary.claim_review_count} claim review(s), consensus={response.summary.consensus.value}"
    )
    return response


@router.get("/fact-check/articles", response_model=ArticlesPage, responses=ERROR_RESPONSES)
async def fact_check_articles(
    query: str = "",
    category: str = "",
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    page_token: Optional[str] = Query(None, alias="pageToken"),
    claim_search: GoogleFactCheckClient = Depends(get_claim_search),
) -> ArticlesPage:
    """
    List recent fact-check articles, optionally filtered by query and category.

    Pass the `nextPageToken` of a previous page as `pageToken` to continue.
    """
    return await list_articles(
        claim_search,
        query=query,
        category=category,
        page=page,
        limit=limit,
        page_token=page_token,
    )
