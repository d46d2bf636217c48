"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from diary.config import Settings
from diary.interface.api.schema import Envelope, ok

router = APIRouter(prefix="/api", tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    git_sha: str


@router.get("/health", response_model=Envelope[HealthResponse])
async def health_check(settings: FromDishka[Settings]) -> Envelope[HealthResponse]:
    """Report that the service is up. Doesn't touch the database."""
    return ok(
        HealthResponse(
            status="ok",
            timestamp=datetime.now(),
            environment=settings.environment,
            git_sha=settings.git_sha,
        ),
        message="Diary API is running",
    )
