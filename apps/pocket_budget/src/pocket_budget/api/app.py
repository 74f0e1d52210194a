"""FastAPI app bootstrap for pocket_budget."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, FastAPI

from pocket_budget.api.error_handlers import register_error_handlers
from pocket_budget.api.routes import v1_router
from pocket_budget.core.settings import Settings, get_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application instance."""

    app = FastAPI(
        title="Pocket Budget Money API",
        version="0.1.0",
    )

    @app.get("/health/live", include_in_schema=False)
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/health/ready", include_in_schema=False)
    def health_ready(
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> dict[str, str]:
        return {"status": "ready", "locale": settings.money_locale}

    register_error_handlers(app)
    app.include_router(v1_router)
    return app


app = create_app()
