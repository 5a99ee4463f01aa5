"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fitcoach_nutrition.api.nutrition import router as nutrition_router
from fitcoach_nutrition.api.usda import router as usda_router
from fitcoach_nutrition.app_logging import configure_logging
from fitcoach_nutrition.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="fitcoach-nutrition", lifespan=lifespan)
    app.state.container = container

    app.include_router(usda_router)
    app.include_router(nutrition_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
