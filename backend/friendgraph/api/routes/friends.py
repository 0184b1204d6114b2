"""Friend Routes — create friendship, list friends, list common friends.

Invariants:
    - Bodies mirror the public contract: {"friends": [a, b]} and {"email": e}
    - Duplicate friendship → 409 ALREADY_FRIENDS; unknown email → 404 USER_NOT_FOUND
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from friendgraph.api.dependencies import get_friendship_manager, get_request_timeout
from friendgraph.infrastructure.database import get_db
from friendgraph.schemas.common import SuccessResponse
from friendgraph.schemas.friendship import (
    FriendListData, FriendListRequest, FriendPairRequest,
)
from friendgraph.services.deadline import run_with_deadline
from friendgraph.services.friendship_manager import FriendshipManager

router = APIRouter(prefix="/api/v1/friends", tags=["friends"])


@router.post(
    "", response_model=SuccessResponse, response_model_exclude_none=True,
)
async def create_friendship(
    body: FriendPairRequest,
    manager: FriendshipManager = Depends(get_friendship_manager),
    timeout: float = Depends(get_request_timeout),
    db: AsyncSession = Depends(get_db),
):
    """Create a friend connection between two emails."""
    email_a, email_b = body.friends

    async def _create_and_commit():
        await manager.create_friendship(email_a, email_b)
        await db.commit()

    await run_with_deadline(_create_and_commit(), "create_friendship", timeout)
    return SuccessResponse()


@router.post("/list", response_model=SuccessResponse)
async def list_friends(
    body: FriendListRequest,
    manager: FriendshipManager = Depends(get_friendship_manager),
    timeout: float = Depends(get_request_timeout),
):
    """List the friends of an email."""
    friends = await run_with_deadline(
        manager.list_friends(body.email), "list_friends", timeout,
    )
    return SuccessResponse(
        data=FriendListData(friends=friends, count=len(friends)),
    )


@router.post("/common", response_model=SuccessResponse)
async def list_common_friends(
    body: FriendPairRequest,
    manager: FriendshipManager = Depends(get_friendship_manager),
    timeout: float = Depends(get_request_timeout),
):
    """List friends shared by two emails."""
    email_a, email_b = body.friends
    friends = await run_with_deadline(
        manager.list_common_friends(email_a, email_b),
        "list_common_friends", timeout,
    )
    return SuccessResponse(
        data=FriendListData(friends=friends, count=len(friends)),
    )
