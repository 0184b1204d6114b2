"""Shared schema pieces — email field and the response envelope.

Invariants:
    - Emails are stripped and must look like local@domain; case is preserved
    - Every successful response is {"success": true, "data"?: ...}
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field


def _strip(v: Any) -> Any:
    return v.strip() if isinstance(v, str) else v


EmailField = Annotated[
    str,
    BeforeValidator(_strip),
    Field(max_length=254, pattern=r"^[^@\s]+@[^@\s]+$"),
]


class SuccessResponse(BaseModel):
    """Success envelope."""
    success: bool = True
    data: Any | None = None
