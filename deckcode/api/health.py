"""Health endpoint for the deck code service."""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the deck code service is up. The card catalog is not loaded here."""
    return HealthResponse(status="healthy")
