"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from menu_ranker.api.models import ScanRequest, ScanResponse
from menu_ranker.app_logging import configure_logging
from menu_ranker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/scans")
    async def create_scan(payload: ScanRequest, request: Request) -> ScanResponse:
        """Resolve, score and rank a scraped menu."""
        state_container: AppContainer = request.app.state.container
        batch = await state_container.scan_service.scan(payload.to_scraped_items())
        return ScanResponse.from_batch(batch)

    @app.get("/scans/latest")
    async def latest_scan(request: Request) -> ScanResponse:
        """Return the newest scan, including one still in progress."""
        state_container: AppContainer = request.app.state.container
        batch = state_container.scan_registry.latest
        if batch is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return ScanResponse.from_batch(batch)

    return app
