"""FastAPI application for the analysis service.

The model client is built during startup so a missing API key stops the
server before it accepts requests, instead of failing the first upload.
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from src.agent.analysis_agent import get_agent_service
from src.api.routes import router as analyze_router

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    """Read allowed origins from CORS_ORIGINS (comma-separated, default "*")."""
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Resolve the analysis service before serving.

    Honors dependency_overrides so tests can start the app with a fake.

    Raises:
        ValidationError: If the model configuration is incomplete.
    """
    factory = app.dependency_overrides.get(get_agent_service, get_agent_service)
    try:
        service = factory()
    except ValidationError as e:
        logger.error(f"Analysis service misconfigured, refusing to start: {e}")
        raise

    logger.info(f"Nutrition Lens API ready ({type(service).__name__})")
    yield
    logger.info("Nutrition Lens API stopped")


def create_app() -> FastAPI:
    """Build the API app with CORS and the analyze routes."""
    application = FastAPI(
        title="Nutrition Lens API",
        description=(
            "Answers a question about one attached image, audio clip, "
            "video or PDF using a generative model."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    application.include_router(analyze_router)
    return application


app = create_app()
