"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usda_nutrition.api.cart import router as cart_router
from usda_nutrition.api.nutrition import router as nutrition_router
from usda_nutrition.api.streak import router as streak_router
from usda_nutrition.app_logging import configure_logging
from usda_nutrition.config import parse_allowed_origins
from usda_nutrition.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "USDA nutrition API starting (environment=%s)",
            container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(nutrition_router)
    app.include_router(cart_router)
    app.include_router(streak_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "OK", "message": "USDA Nutrition API is live"}

    return app
