from .claim_analysis import (
    ClaimAnalysisService,
    SummaryGenerationFailed,
    VERACITY_LABELS,
    CATEGORY_LABELS,
)

__all__ = [
    "ClaimAnalysisService",
    "SummaryGenerationFailed",
    "VERACITY_LABELS",
    "CATEGORY_LABELS",
]
