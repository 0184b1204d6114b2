"""Subscription & Block Routes — requestor/target mutations.

Invariants:
    - Duplicate subscription → 409 ALREADY_SUBSCRIBED; duplicate block → 409 ALREADY_BLOCKED
    - Block's subscription removal and block insert are committed together
    - The commit runs inside the request deadline with the service call
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from friendgraph.api.dependencies import get_request_timeout, get_subscription_manager
from friendgraph.infrastructure.database import get_db
from friendgraph.schemas.common import SuccessResponse
from friendgraph.schemas.subscription import BlockData, RequestorTargetRequest
from friendgraph.services.deadline import run_with_deadline
from friendgraph.services.subscription_manager import SubscriptionManager

router = APIRouter(prefix="/api/v1", tags=["subscriptions"])


@router.post(
    "/subscriptions", response_model=SuccessResponse,
    response_model_exclude_none=True,
)
async def subscribe(
    body: RequestorTargetRequest,
    manager: SubscriptionManager = Depends(get_subscription_manager),
    timeout: float = Depends(get_request_timeout),
    db: AsyncSession = Depends(get_db),
):
    """Subscribe requestor to target's updates."""
    async def _subscribe_and_commit():
        await manager.subscribe(body.requestor, body.target)
        await db.commit()

    await run_with_deadline(_subscribe_and_commit(), "subscribe", timeout)
    return SuccessResponse()


@router.post("/blocks", response_model=SuccessResponse)
async def block(
    body: RequestorTargetRequest,
    manager: SubscriptionManager = Depends(get_subscription_manager),
    timeout: float = Depends(get_request_timeout),
    db: AsyncSession = Depends(get_db),
):
    """Block target's updates for requestor."""
    async def _block_and_commit():
        removed = await manager.block(body.requestor, body.target)
        await db.commit()
        return removed

    removed = await run_with_deadline(_block_and_commit(), "block", timeout)
    return SuccessResponse(data=BlockData(subscription_removed=removed))
