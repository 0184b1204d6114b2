"""Recipient Route — eligible recipients for a sender's message.

Invariants:
    - Read-only: nothing is committed
    - Recipients rendered sorted; the set carries no ordering meaning
"""

from fastapi import APIRouter, Depends

from friendgraph.api.dependencies import get_recipient_resolver, get_request_timeout
from friendgraph.schemas.common import SuccessResponse
from friendgraph.schemas.recipients import RecipientsData, RecipientsRequest
from friendgraph.services.deadline import run_with_deadline
from friendgraph.services.recipient_resolver import RecipientResolver

router = APIRouter(prefix="/api/v1/recipients", tags=["recipients"])


@router.post("", response_model=SuccessResponse)
async def resolve_recipients(
    body: RecipientsRequest,
    resolver: RecipientResolver = Depends(get_recipient_resolver),
    timeout: float = Depends(get_request_timeout),
):
    """Emails eligible to receive an update from sender."""
    recipients = await run_with_deadline(
        resolver.resolve(body.sender, body.text), "resolve_recipients", timeout,
    )
    return SuccessResponse(data=RecipientsData(recipients=sorted(recipients)))
