"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from invitations.config import Settings
from invitations.domain.service import InvitationTypeRegistry

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    invitation_types: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], registry: FromDishka[InvitationTypeRegistry]
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status and the invitation types this instance serves
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        environment=settings.environment,
        invitation_types=[t.id for t in registry],
    )
