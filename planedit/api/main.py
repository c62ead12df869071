"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planedit.api.routes import router


def create_app(allowed_origins: list[str] | None = None) -> FastAPI:
    """Build the corner editor API; `allowed_origins` defaults to any origin."""
    app = FastAPI(
        title="Plan Corner Editor",
        description="Corner bevel and angle kernel with preview/commit editing",
        version="0.1.0",
    )

    # The plan canvas runs on its own dev origin and drives the gesture endpoints
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
