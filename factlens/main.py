from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from factlens.ai.main_pipeline import CONTENT_REQUIRED_MESSAGE
from factlens.api.endpoints import fact_check, image, news
from factlens.config.default import (
    build_claim_search,
    build_default_pipeline,
    build_ingestion_adapter,
    build_news_client,
    get_default_pipeline_config,
)
from factlens.config.settings import Settings, get_settings
from factlens.models import FactCheckError
from factlens.observability.logger import get_logger, setup_logging, PipelineStep

load_dotenv()
setup_logging()

logger = get_logger(__name__, PipelineStep.SYSTEM)

TEXT_ROUTES = {"/api/fact-check", "/api/fact-check/fact-check"}
INVALID_REQUEST_MESSAGE = "Invalid request parameters."


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        config = get_default_pipeline_config(settings)
        claim_search = build_claim_search(settings, config)

        app.state.claim_search = claim_search
        app.state.pipeline = build_default_pipeline(settings, config, claim_search=claim_search)
        app.state.news_client = build_news_client(settings)
        app.state.ingestion = build_ingestion_adapter(settings)

        logger.info(
            f"providers ready: claim_search={claim_search.is_configured}, "
            f"summary_llm={config.summary_llm_config.llm is not None}, "
            f"zero_shot={bool(settings.hf_api_key)}, news={app.state.news_client.is_configured}"
        )
        yield

    return lifespan


async def fact_check_error_handler(request: Request, exc: FactCheckError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """malformed bodies and bad query params get the same {"error": ...} shape as every other failure"""
    logger.warning(f"rejected request to {request.url.path}: {exc.errors()}")
    if request.url.path.rstrip("/") in TEXT_ROUTES:
        message = CONTENT_REQUIRED_MESSAGE
    else:
        message = INVALID_REQUEST_MESSAGE
    return JSONResponse(status_code=400, content={"error": message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="FactLens API",
        description="Fact-check aggregation for text claims and images",
        version="1.0.0",
        lifespan=_build_lifespan(settings),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FactCheckError, fact_check_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(fact_check.router, prefix="/api", tags=["fact-check"])
    app.include_router(image.router, prefix="/api", tags=["fact-check"])
    app.include_router(news.router, prefix="/api", tags=["news"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "All are ok"

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("factlens.main:app", host=settings.host, port=settings.port)
