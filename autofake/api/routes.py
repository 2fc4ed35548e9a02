"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from autofake.services.fake_service import FakeService
from autofake.api.schemas import (
    GenerateRequest, GenerateResponse, ModelInfo,
)

router = APIRouter()


def get_service(request: Request) -> FakeService:
    return request.app.state.service


@router.post("/generate", response_model=GenerateResponse)
async def generate_items(
    request: GenerateRequest,
    service: FakeService = Depends(get_service),
) -> GenerateResponse:
    """Generate fake instances of a registered model."""
    try:
        items = service.generate(request.name, request.count, request.rule_sets)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown model {request.name!r}")

    return GenerateResponse(
        name=request.name,
        count=len(items),
        items=items,
    )


@router.get("/models", response_model=list[ModelInfo])
async def list_models(service: FakeService = Depends(get_service)) -> list[ModelInfo]:
    """List all registered models."""
    return [ModelInfo(**m) for m in service.list_models()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
