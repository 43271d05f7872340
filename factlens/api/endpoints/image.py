import time
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from factlens.ai.main_pipeline import IMAGE_FAILURE_MESSAGE, FactCheckPipeline
from factlens.api.dependencies import get_ingestion_adapter, get_pipeline
from factlens.api.endpoints.fact_check import ERROR_RESPONSES
from factlens.api.image_ingestion import ImageIngestionAdapter
from factlens.models import (
    FactCheckError,
    FactCheckProcessingFailed,
    InvalidInput,
    NormalizedResponse,
)
from factlens.observability.logger import get_request_logger, PipelineStep
from factlens.utils.id_generator import generate_request_id

router = APIRouter()


@router.post("/fact-check-image", response_model=NormalizedResponse, responses=ERROR_RESPONSES)
async def fact_check_image(
    image: Optional[UploadFile] = File(None),
    pipeline: FactCheckPipeline = Depends(get_pipeline),
    ingestion: ImageIngestionAdapter = Depends(get_ingestion_adapter),
) -> NormalizedResponse:
    """
    Fact-check the text and objects found in an uploaded image.

    The upload (multipart field `image`, max 5 MB) is stored only for the
    duration of the request.
    """
    start_time = time.time()
    request_id = generate_request_id()
    logger = get_request_logger(__name__, PipelineStep.IMAGE_INGESTION, request_id)

    if image is None:
        logger.info("rejected image request: no file")
        raise InvalidInput("No image file uploaded")

    logger.info(f"received image fact-check request: {image.filename} ({image.content_type})")

    try:
        async with ingestion.acquire(image, image.filename, image.content_type) as path:
            response = await pipeline.run_image_fact_check(path, request_id=request_id)
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
        raise FactCheckProcessingFailed(IMAGE_FAILURE_MESSAGE) from e

    total_duration = (time.time() - start_time) * 1000
    logger.info(
        f"request completed in {total_duration:.0f}ms: "
        f"{response.summary.claim_review_count} claim review(s)"
    )
    return response
