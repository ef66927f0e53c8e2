"""Subscribers — subscription intake endpoint.

Invariants:
    - POST /api/subscribers returns 201 with {id, email, createdAt}
    - Raw JSON body handed to SubscriptionService: validation happens once, there
    - LandingError subclasses propagate to the global handlers (400/409/500)

Design Decisions:
    - Body typed as Any, not SubscriberCreate: a FastAPI body model would answer
      with the generic validation envelope before the service runs
    - Service built per request from the request's DB session
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.contract import SUBSCRIBERS_CREATE
from app.infrastructure.database import get_db
from app.infrastructure.subscriber_repository import SqlSubscriberRepository
from app.schemas.subscriber import SubscriberResponse
from app.services.subscription_service import SubscriptionService

router = APIRouter(tags=["subscribers"])


def get_subscription_service(
    db: AsyncSession = Depends(get_db),
) -> SubscriptionService:
    return SubscriptionService(SqlSubscriberRepository(db))


@router.api_route(
    SUBSCRIBERS_CREATE.path,
    methods=[SUBSCRIBERS_CREATE.method],
    response_model=SubscriberResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        code: {"model": schema}
        for code, schema in SUBSCRIBERS_CREATE.responses.items()
        if code != status.HTTP_201_CREATED
    },
)
async def create_subscriber(
    payload: Any = Body(None),
    service: SubscriptionService = Depends(get_subscription_service),
):
    """Subscribe an email address to the early access list."""
    subscriber = await service.subscribe(payload)
    return SubscriberResponse.from_domain(subscriber)
