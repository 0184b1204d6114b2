"""Subscription/Block Schemas — requestor/target pair bodies."""

from pydantic import BaseModel

from friendgraph.schemas.common import EmailField


class RequestorTargetRequest(BaseModel):
    """Body for subscribe and block: requestor acts on target."""
    requestor: EmailField
    target: EmailField


class BlockData(BaseModel):
    subscription_removed: bool
