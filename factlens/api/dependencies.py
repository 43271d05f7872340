"""
FastAPI dependencies.

collaborators are built once in the application lifespan and stored on
app.state; endpoints receive them through Depends so tests can swap them
with app.dependency_overrides.
"""

from fastapi import Request

from factlens.ai.context.factcheckapi import GoogleFactCheckClient
from factlens.ai.context.protocols import NewsProviderProtocol
from factlens.ai.main_pipeline import FactCheckPipeline
from factlens.api.image_ingestion import ImageIngestionAdapter


def get_pipeline(request: Request) -> FactCheckPipeline:
    return request.app.state.pipeline


def get_claim_search(request: Request) -> GoogleFactCheckClient:
    return request.app.state.claim_search


def get_news_client(request: Request) -> NewsProviderProtocol:
    return request.app.state.news_client


def get_ingestion_adapter(request: Request) -> ImageIngestionAdapter:
    return request.app.state.ingestion
