"""
Claim Analysis Service.

Wraps the zero-shot classifier and the language model:
- classify_veracity: true / false / misleading with confidence
- classify_category: one topic label with confidence
- synthesize_summary: overview / consensus / conclusion over a set of claim reviews

Every operation is best-effort. Each returns a Recoverable whose value is a
fixed fallback when the provider is missing or fails, so callers always get a
well-formed answer.
"""

import asyncio
import json
import re
from typing import List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable
from pydantic import ValidationError

from factlens.ai.context.protocols import ZeroShotClassifierProtocol
from factlens.ai.pipeline.prompts import get_summary_prompt
from factlens.models import (
    AISummary,
    Categorization,
    ClaimReview,
    Consensus,
    ProviderUnavailable,
    Recoverable,
)
from factlens.observability.logger import get_logger, PipelineStep

logger = get_logger(__name__, PipelineStep.CLAIM_ANALYSIS)
summary_logger = get_logger(__name__, PipelineStep.SUMMARY)

VERACITY_LABELS = ["true", "false", "misleading"]
CATEGORY_LABELS = ["politics", "health", "technology", "conspiracy", "religion", "science"]

# consensus values the model may choose; the other two are reserved for fallbacks
MODEL_CONSENSUS_OPTIONS = [
    Consensus.STRONG,
    Consensus.GENERAL,
    Consensus.MIXED,
    Consensus.CONTRADICTORY,
]

NO_ANALYSIS_MESSAGE = "No AI analysis available."
NO_CATEGORIZATION_MESSAGE = "No categorization available."

INSUFFICIENT_DATA_SUMMARY = AISummary(
    overview="No existing fact-checks were found for this claim.",
    consensus=Consensus.INSUFFICIENT_DATA,
    conclusion="Further investigation is required as no prior art was found.",
)

MISSING_MODEL_SUMMARY = AISummary(
    overview="Language model API key not set or language model not initialized.",
    consensus=Consensus.ERROR,
    conclusion="Could not generate summary due to missing language model configuration.",
)

FAILED_SUMMARY = AISummary(
    overview="An error occurred while generating the AI summary.",
    consensus=Consensus.ERROR,
    conclusion="Could not determine a conclusion due to an internal error.",
)

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)


class SummaryGenerationFailed(Exception):
    """the language model answer could not be turned into an AISummary"""


def strip_code_fences(text: str) -> str:
    """remove a surrounding ```json ... ``` wrapper, if any"""
    return _CODE_FENCE.sub("", text).strip()


def parse_summary(text: str) -> AISummary:
    """
    parse a model answer into an AISummary.

    raises:
        SummaryGenerationFailed: not JSON, not an object, or fields invalid
    """
    try:
        payload = json.loads(strip_code_fences(text))
        if not isinstance(payload, dict):
            raise SummaryGenerationFailed(f"expected a JSON object, got {type(payload).__name__}")
        return AISummary.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as e:
        raise SummaryGenerationFailed(str(e)) from e


def format_confidence(score: float) -> str:
    return f"{score * 100:.1f}"


class ClaimAnalysisService:
    """
    claim analysis over injected providers.

    args:
        classifier: zero-shot classifier, or None when unconfigured
        llm: langchain chat model for summaries, or None when unconfigured
        classification_timeout: seconds allowed per classification call
        summary_timeout: seconds allowed for the summary call
    """

    def __init__(
        self,
        classifier: Optional[ZeroShotClassifierProtocol],
        llm: Optional[BaseChatModel],
        classification_timeout: float = 20.0,
        summary_timeout: float = 30.0,
    ):
        self.classifier = classifier
        self.llm = llm
        self.classification_timeout = classification_timeout
        self.summary_timeout = summary_timeout

    async def _classify(self, text: str, labels: List[str]) -> tuple[str, float]:
        if self.classifier is None:
            raise ProviderUnavailable("zero-shot classifier is not configured")
        result = await asyncio.wait_for(
            self.classifier.classify(text, labels),
            timeout=self.classification_timeout,
        )
        return result.top()

    async def classify_veracity(self, text: str) -> Recoverable[str]:
        try:
            label, score = await self._classify(text, VERACITY_LABELS)
        except Exception as e:
            logger.warning(f"veracity classification failed: {type(e).__name__}: {e}")
            return Recoverable.fallback(NO_ANALYSIS_MESSAGE, e)

        return Recoverable.ok(
            f"This claim is likely **{label}** (confidence: {format_confidence(score)}%)."
        )

    async def classify_category(self, text: str) -> Recoverable[Categorization]:
        try:
            label, score = await self._classify(text, CATEGORY_LABELS)
        except Exception as e:
            logger.warning(f"category classification failed: {type(e).__name__}: {e}")
            return Recoverable.fallback(
                Categorization(message=NO_CATEGORIZATION_MESSAGE, categories=[]), e
            )

        return Recoverable.ok(
            Categorization(
                message=f"Categorized as: {label} (confidence: {format_confidence(score)}%)",
                categories=[label],
            )
        )

    def build_summary_chain(self) -> Runnable:
        """prompt | model | output_parser -> str"""
        return get_summary_prompt() | self.llm | StrOutputParser()

    async def synthesize_summary(self, claim_reviews: List[ClaimReview]) -> Recoverable[AISummary]:
        if not claim_reviews:
            return Recoverable.ok(INSUFFICIENT_DATA_SUMMARY)

        if self.llm is None:
            summary_logger.warning("no language model configured - returning configuration error summary")
            return Recoverable.fallback(
                MISSING_MODEL_SUMMARY, ProviderUnavailable("language model is not configured")
            )

        chain_input = {
            "claim_reviews_json": json.dumps(
                [review.model_dump(by_alias=True, exclude_none=True) for review in claim_reviews],
                indent=2,
                ensure_ascii=False,
            ),
            "consensus_options": ", ".join(f'"{option.value}"' for option in MODEL_CONSENSUS_OPTIONS),
        }

        try:
            answer: str = await asyncio.wait_for(
                self.build_summary_chain().ainvoke(chain_input),
                timeout=self.summary_timeout,
            )
            summary = parse_summary(answer)
        except Exception as e:
            summary_logger.error(f"error generating AI summary: {type(e).__name__}: {e}")
            return Recoverable.fallback(FAILED_SUMMARY, e)

        summary_logger.info(
            f"summary generated over {len(claim_reviews)} claim(s): {summary.consensus.value}"
        )
        return Recoverable.ok(summary)
