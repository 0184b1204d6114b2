"""User Routes — explicit user registration.

Invariants:
    - POST /api/v1/users returns 201 with {id, email}; duplicate email → 409
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from friendgraph.api.dependencies import get_request_timeout, get_user_directory
from friendgraph.infrastructure.database import get_db
from friendgraph.schemas.common import SuccessResponse
from friendgraph.schemas.user import UserCreate, UserData
from friendgraph.services.deadline import run_with_deadline
from friendgraph.services.user_directory import UserDirectory

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "", response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    directory: UserDirectory = Depends(get_user_directory),
    timeout: float = Depends(get_request_timeout),
    db: AsyncSession = Depends(get_db),
):
    """Register a user by email."""
    async def _register_and_commit():
        created = await directory.register(body.email)
        await db.commit()
        return created

    user = await run_with_deadline(
        _register_and_commit(), "create_user", timeout,
    )
    return SuccessResponse(data=UserData(id=user.id, email=user.email))
