"""Recipient Schemas — sender plus free message text.

Invariants:
    - text is arbitrary (may be empty); only its length is bounded
"""

from pydantic import BaseModel, Field

from friendgraph.schemas.common import EmailField


class RecipientsRequest(BaseModel):
    sender: EmailField
    text: str = Field(default="", max_length=10_000)


class RecipientsData(BaseModel):
    recipients: list[str]
