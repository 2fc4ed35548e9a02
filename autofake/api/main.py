"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autofake.api.routes import router
from autofake.services.fake_service import FakeService


def create_app(service: FakeService | None = None) -> FastAPI:
    """
    Build the API around `service`.

    Without a service the app starts with an empty catalog, so every
    `POST /api/generate` answers 404. Callers register their models on a
    `FakeService` and pass it in.
    """
    app = FastAPI(
        title="AutoFake",
        description="Rule-set aware fake data generator",
        version="0.1.0",
    )

    # CORS — mock data is typically consumed by local frontends
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.service = service or FakeService()
    app.include_router(router, prefix="/api")

    return app


app = create_app()
