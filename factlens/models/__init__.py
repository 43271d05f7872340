from .factchecking import (
    CamelModel,
    ReviewVerdict,
    ClaimReview,
    ImageLabel,
    WebEntity,
    ImageAnalysisResult,
    ZeroShotResult,
    Categorization,
    Consensus,
    AISummary,
    ResponseSummary,
    ResponseData,
    NormalizedResponse,
    Article,
    Pagination,
    ArticlesPage,
)
from .config import (
    LLMConfig,
    TimeoutConfig,
    PipelineConfig,
)
from .api import FactCheckRequest, ErrorResponse
from .errors import (
    FactCheckError,
    InvalidInput,
    UnsupportedImageType,
    ImageTooLarge,
    ProviderUnavailable,
    ProviderCallFailed,
    FactCheckProcessingFailed,
    NoContentDetected,
)
from .results import Recoverable, Fallible, attempt

__all__ = [
    "CamelModel",
    "ReviewVerdict",
    "ClaimReview",
    "ImageLabel",
    "WebEntity",
    "ImageAnalysisResult",
    "ZeroShotResult",
    "Categorization",
    "Consensus",
    "AISummary",
    "ResponseSummary",
    "ResponseData",
    "NormalizedResponse",
    "Article",
    "Pagination",
    "ArticlesPage",
    "LLMConfig",
    "TimeoutConfig",
    "PipelineConfig",
    "FactCheckRequest",
    "ErrorResponse",
    "FactCheckError",
    "InvalidInput",
    "UnsupportedImageType",
    "ImageTooLarge",
    "ProviderUnavailable",
    "ProviderCallFailed",
    "FactCheckProcessingFailed",
    "NoContentDetected",
    "Recoverable",
    "Fallible",
    "attempt",
]
