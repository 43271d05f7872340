from typing import Optional

from pydantic import BaseModel, Field, ConfigDict
from langchain_core.language_models.chat_models import BaseChatModel


class LLMConfig(BaseModel):
    """language model used for summary synthesis; None when unconfigured"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm: Optional[BaseChatModel] = Field(
        default=None,
        description="langchain chat model (ChatGoogleGenerativeAI or any BaseChatModel)"
    )


class TimeoutConfig(BaseModel):
    """per-call timeouts for outbound provider calls (seconds)"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "claim_review_search_timeout": 15.0,
            "image_analysis_timeout": 30.0,
            "zero_shot_timeout": 20.0,
            "summary_timeout": 30.0,
            "news_timeout": 15.0
        }
    })

    claim_review_search_timeout: float = Field(
        default=15.0,
        description="Timeout for one claim-review search",
        gt=0
    )
    image_analysis_timeout: float = Field(
        default=30.0,
        description="Timeout for one image annotation request",
        gt=0
    )
    zero_shot_timeout: float = Field(
        default=20.0,
        description="Timeout for one zero-shot classification",
        gt=0
    )
    summary_timeout: float = Field(
        default=30.0,
        description="Timeout for the summary language-model call",
        gt=0
    )
    news_timeout: float = Field(
        default=15.0,
        description="Timeout for one news provider request",
        gt=0
    )


class PipelineConfig(BaseModel):
    """complete configuration for the fact-check pipeline"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    summary_llm_config: LLMConfig = Field(
        default_factory=LLMConfig,
        description="LLM configuration for claim-review summary synthesis"
    )
    timeout_config: TimeoutConfig = Field(
        default_factory=TimeoutConfig,
        description="Per-call timeouts"
    )
    claim_review_language: str = Field(
        default="en-US",
        description="languageCode sent to the claim-review provider"
    )
    max_image_labels: int = Field(
        default=10,
        description="Maximum labels / web entities requested from the vision provider",
        gt=0
    )
