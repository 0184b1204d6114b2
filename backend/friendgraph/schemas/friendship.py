"""Friendship Schemas — friend pair and single-user request bodies.

Invariants:
    - FriendPairRequest.friends holds exactly two emails
"""

from pydantic import BaseModel, Field

from friendgraph.schemas.common import EmailField


class FriendPairRequest(BaseModel):
    """Body for create-friendship and common-friends: {"friends": [a, b]}."""
    friends: list[EmailField] = Field(min_length=2, max_length=2)


class FriendListRequest(BaseModel):
    email: EmailField


class FriendListData(BaseModel):
    friends: list[str]
    count: int
