"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ingredient_substitutions.api.substitutions import router as substitutions_router
from ingredient_substitutions.app_logging import configure_logging
from ingredient_substitutions.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Substitution API ready: environment=%s known_keys=%s ai_enabled=%s",
            container.settings.environment,
            len(container.catalog.all_known_keys()),
            container.suggestion_service.client is not None,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Ingredient Substitutions", lifespan=lifespan)
    app.state.container = container

    app.include_router(substitutions_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
