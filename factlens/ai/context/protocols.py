"""
provider protocols for dependency injection and testing.

the pipeline and the claim analysis service depend only on these, so every
external provider can be replaced with a test double.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from factlens.models import ClaimReview, ImageAnalysisResult, ZeroShotResult


@runtime_checkable
class ClaimReviewSearchProtocol(Protocol):
    @property
    def is_configured(self) -> bool: ...
    async def search(self, query: str) -> List[ClaimReview]: ...


@runtime_checkable
class ImageAnalyzerProtocol(Protocol):
    async def analyze(self, image_path: str) -> ImageAnalysisResult: ...


@runtime_checkable
class ZeroShotClassifierProtocol(Protocol):
    async def classify(self, text: str, candidate_labels: List[str]) -> ZeroShotResult: ...


@runtime_checkable
class NewsProviderProtocol(Protocol):
    async def fetch(
        self,
        category: Optional[str] = None,
        keyword: Optional[str] = None
    ) -> Dict[str, Any]: ...
