"""
Main fact-check aggregation pipeline.

Both entry points converge on one NormalizedResponse:

text path:
    veracity classification ─┐
    category classification ─┼─> joined -> NormalizedResponse
    claim-review search -> summary synthesis ─┘

image path (sequential):
    image analysis -> query derivation -> claim-review search -> summary synthesis

Architecture:
- collaborators are injected once at construction (see factlens.config.default)
- best-effort steps return Recoverable values and never fail the request
- fail-fast steps are captured as Fallible values and unwrapped at the seam
- every outbound call runs under asyncio.wait_for with its configured timeout
"""

import asyncio
from pathlib import Path
from typing import List, Optional, Tuple, Union

from factlens.ai.context.factcheckapi.google_factcheck_client import MISSING_KEY_MESSAGE
from factlens.ai.context.protocols import ClaimReviewSearchProtocol, ImageAnalyzerProtocol
from factlens.ai.pipeline.claim_analysis import ClaimAnalysisService
from factlens.models import (
    AISummary,
    ClaimReview,
    Fallible,
    FactCheckProcessingFailed,
    InvalidInput,
    NoContentDetected,
    NormalizedResponse,
    ProviderUnavailable,
    Recoverable,
    TimeoutConfig,
    attempt,
)
from factlens.observability.logger import get_request_logger, time_profile, PipelineStep

CONTENT_REQUIRED_MESSAGE = "Content is required."
TEXT_FAILURE_MESSAGE = "Failed to process fact check request."
IMAGE_FAILURE_MESSAGE = "Failed to process image fact check request."
NO_CONTENT_MESSAGE = "No meaningful text or labels found in image."

# errors the image path surfaces unchanged instead of the generic failure
_IMAGE_PASSTHROUGH_ERRORS = (InvalidInput, NoContentDetected, ProviderUnavailable)


def describe_image_text(extracted_text: str, labels: List[str]) -> str:
    return f'Image contained text: "{extracted_text or "N/A"}" and labels like: {", ".join(labels)}.'


def describe_image_labels(labels: List[str]) -> str:
    return f"Image labels: {', '.join(labels)}"


class FactCheckPipeline:
    """
    orchestrates providers for one request at a time; holds no per-request state.

    args:
        claim_search: claim-review searcher
        image_analyzer: vision analyzer, or None when the image path is not configured
        claim_analysis: zero-shot + language model service
        timeout_config: per-call timeouts
    """

    def __init__(
        self,
        claim_search: ClaimReviewSearchProtocol,
        image_analyzer: Optional[ImageAnalyzerProtocol],
        claim_analysis: ClaimAnalysisService,
        timeout_config: Optional[TimeoutConfig] = None,
    ):
        self.claim_search = claim_search
        self.image_analyzer = image_analyzer
        self.claim_analysis = claim_analysis
        self.timeout_config = timeout_config or TimeoutConfig()

    def _require_claim_search(self) -> None:
        if not self.claim_search.is_configured:
            raise ProviderUnavailable(MISSING_KEY_MESSAGE)

    async def _search(self, query: str) -> Fallible[List[ClaimReview]]:
        return await attempt(
            lambda: self.claim_search.search(query),
            timeout=self.timeout_config.claim_review_search_timeout,
        )

    async def _search_and_summarize(
        self,
        query: str,
    ) -> Tuple[List[ClaimReview], Recoverable[AISummary]]:
        """the fallible chain: summary waits only on the search"""
        claim_reviews = (await self._search(query)).unwrap()
        summary = await self.claim_analysis.synthesize_summary(claim_reviews)
        return claim_reviews, summary

    @time_profile(PipelineStep.API_INTAKE)
    async def run_text_fact_check(
        self,
        content: Optional[str],
        request_id: Optional[str] = None,
    ) -> NormalizedResponse:
        """
        fact-check a free-text claim.

        veracity, category and the search -> summary chain run concurrently and
        are all joined before returning, whether or not one of them failed.

        raises:
            InvalidInput: content missing or blank
            ProviderUnavailable: the claim-review provider has no credentials
            FactCheckProcessingFailed: the search -> summary chain failed
        """
        logger = get_request_logger(__name__, PipelineStep.API_INTAKE, request_id)

        text = (content or "").strip()
        if not text:
            raise InvalidInput(CONTENT_REQUIRED_MESSAGE)

        self._require_claim_search()
        logger.info(f"text fact-check started: {len(text)} chars")

        veracity, category, chain = await asyncio.gather(
            self.claim_analysis.classify_veracity(text),
            self.claim_analysis.classify_category(text),
            self._search_and_summarize(text),
            return_exceptions=True,
        )

        failure = next(
            (result for result in (veracity, category, chain) if isinstance(result, BaseException)),
            None,
        )
        if failure is not None:
            logger.error(
                f"text fact-check failed: {type(failure).__name__}: {failure}",
                exc_info=failure,
            )
            raise FactCheckProcessingFailed(TEXT_FAILURE_MESSAGE) from failure

        claim_reviews, summary = chain
        if veracity.degraded or category.degraded or summary.degraded:
            logger.warning(
                f"degraded analysis: veracity={veracity.degraded}, "
                f"category={category.degraded}, summary={summary.degraded}"
            )

        logger.info(f"text fact-check completed: {len(claim_reviews)} claim review(s)")
        return NormalizedResponse.build(
            ai_summary=summary.value,
            labels=category.value.categories,
            claim_reviews=claim_reviews,
            initial_claim_analysis=veracity.value,
            initial_claim_categorization=category.value.message,
        )

    def _unwrap_image_step(self, result: Fallible, step: str, logger) -> object:
        if not result.failed:
            return result.value
        if isinstance(result.error, _IMAGE_PASSTHROUGH_ERRORS):
            raise result.error
        logger.error(
            f"image fact-check failed during {step}: {type(result.error).__name__}: {result.error}",
            exc_info=result.error,
        )
        raise FactCheckProcessingFailed(IMAGE_FAILURE_MESSAGE) from result.error

    @time_profile(PipelineStep.IMAGE_ANALYSIS)
    async def run_image_fact_check(
        self,
        image_path: Union[str, Path],
        request_id: Optional[str] = None,
    ) -> NormalizedResponse:
        """
        fact-check whatever text and labels the vision provider finds in an image.

        the file at image_path is owned by the caller and is never deleted here.

        raises:
            InvalidInput: the file does not exist or is not readable
            ProviderUnavailable: a required provider has no credentials
            NoContentDetected: no text and no labels, so nothing to search for
            FactCheckProcessingFailed: a provider call failed
        """
        logger = get_request_logger(__name__, PipelineStep.IMAGE_ANALYSIS, request_id)

        path = Path(image_path)
        if not path.is_file():
            raise InvalidInput("Image file not found. Please check file path and permissions.")
        if self.image_analyzer is None:
            raise ProviderUnavailable("Image analysis provider is not configured.")

        analyzed = await attempt(
            lambda: self.image_analyzer.analyze(str(path)),
            timeout=self.timeout_config.image_analysis_timeout,
        )
        analysis = self._unwrap_image_step(analyzed, "image analysis", logger)

        labels = analysis.label_descriptions()
        query = analysis.search_query()
        if not query:
            logger.warning("image produced no text and no labels - skipping claim-review search")
            raise NoContentDetected(NO_CONTENT_MESSAGE)

        logger.info(f"derived query from image: {len(analysis.extracted_text)} chars of text, {len(labels)} label(s)")

        self._require_claim_search()
        claim_reviews = self._unwrap_image_step(await self._search(query), "claim-review search", logger)
        summary = await self.claim_analysis.synthesize_summary(claim_reviews)

        logger.info(f"image fact-check completed: {len(claim_reviews)} claim review(s)")
        return NormalizedResponse.build(
            ai_summary=summary.value,
            labels=labels,
            claim_reviews=claim_reviews,
            initial_claim_analysis=describe_image_text(analysis.extracted_text, labels),
            initial_claim_categorization=describe_image_labels(labels),
        )
