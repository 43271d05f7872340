"""
default configuration factory for the fact-check pipeline.

provides a centralized location for creating the PipelineConfig and wiring the
provider clients from Settings. everything here runs once, at application
startup; missing credentials leave the matching provider unconfigured.
"""

from typing import Optional

from factlens.ai.context.factcheckapi import GoogleFactCheckClient
from factlens.ai.context.news import NewsApiClient
from factlens.ai.context.vision import GoogleVisionAnalyzer
from factlens.ai.main_pipeline import FactCheckPipeline
from factlens.ai.pipeline.claim_analysis import ClaimAnalysisService
from factlens.api.image_ingestion import ImageIngestionAdapter
from factlens.config.settings import Settings, get_settings
from factlens.llms import HuggingFaceZeroShotClassifier, create_gemini_model
from factlens.models import PipelineConfig, LLMConfig, TimeoutConfig


def get_default_pipeline_config(settings: Optional[Settings] = None) -> PipelineConfig:
    """
    create and return a PipelineConfig with default values.

    example:
        >>> config = get_default_pipeline_config()
        >>> config.timeout_config.summary_timeout
        30.0
    """
    settings = settings or get_settings()
    timeout_config = TimeoutConfig()

    return PipelineConfig(
        # summary synthesis: deterministic output so the JSON stays parseable
        summary_llm_config=LLMConfig(
            llm=create_gemini_model(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
                temperature=0.0,
                timeout=timeout_config.summary_timeout,
            )
        ),
        timeout_config=timeout_config,
        claim_review_language="en-US",
        max_image_labels=10,
    )


def build_claim_search(
    settings: Settings,
    config: PipelineConfig
) -> GoogleFactCheckClient:
    return GoogleFactCheckClient(
        api_key=settings.google_api_key or "",
        language_code=config.claim_review_language,
        timeout=config.timeout_config.claim_review_search_timeout,
    )


def build_default_pipeline(
    settings: Optional[Settings] = None,
    config: Optional[PipelineConfig] = None,
    claim_search: Optional[GoogleFactCheckClient] = None,
) -> FactCheckPipeline:
    """
    wire every provider client into a FactCheckPipeline.

    args:
        settings: environment settings (read from the environment when omitted)
        config: pipeline configuration (defaults from get_default_pipeline_config)
        claim_search: shared claim-review client, built from settings when omitted
    """
    settings = settings or get_settings()
    config = config or get_default_pipeline_config(settings)
    timeouts = config.timeout_config

    classifier = None
    if settings.hf_api_key:
        classifier = HuggingFaceZeroShotClassifier(
            api_key=settings.hf_api_key,
            model_name=settings.hf_model_name,
            base_url=settings.hf_api_base_url,
            timeout=timeouts.zero_shot_timeout,
        )

    claim_analysis = ClaimAnalysisService(
        classifier=classifier,
        llm=config.summary_llm_config.llm,
        classification_timeout=timeouts.zero_shot_timeout,
        summary_timeout=timeouts.summary_timeout,
    )

    # the vision client resolves credentials lazily, on the first image request
    image_analyzer = GoogleVisionAnalyzer(
        service_account_key=settings.google_service_account_key,
        service_account_key_path=settings.google_service_account_key_path,
        max_results=config.max_image_labels,
    )

    return FactCheckPipeline(
        claim_search=claim_search or build_claim_search(settings, config),
        image_analyzer=image_analyzer,
        claim_analysis=claim_analysis,
        timeout_config=timeouts,
    )


def build_news_client(settings: Optional[Settings] = None) -> NewsApiClient:
    settings = settings or get_settings()
    return NewsApiClient(api_key=settings.news_api_key, timeout=TimeoutConfig().news_timeout)


def build_ingestion_adapter(settings: Optional[Settings] = None) -> ImageIngestionAdapter:
    settings = settings or get_settings()
    return ImageIngestionAdapter(
        upload_dir=settings.upload_dir,
        max_bytes=settings.max_upload_bytes,
    )
