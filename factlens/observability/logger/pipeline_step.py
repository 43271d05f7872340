"""
pipeline step enumeration for logging context.

tags every log record with the stage of the fact-check request it came from.
"""

from enum import Enum


class PipelineStep(str, Enum):
    """
    stages of a fact-check request.

    text requests go api_intake -> claim_review_search -> claim_analysis -> summary.
    image requests add image_ingestion and image_analysis in front.
    """

    # request handling
    API_INTAKE = "api_intake"
    IMAGE_INGESTION = "image_ingestion"

    # provider calls
    IMAGE_ANALYSIS = "image_analysis"
    CLAIM_REVIEW_SEARCH = "claim_review_search"
    CLAIM_ANALYSIS = "claim_analysis"
    SUMMARY = "summary"
    NEWS = "news"

    # system level
    SYSTEM = "system"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value
