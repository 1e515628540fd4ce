from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from groupledger.schemas.members import MemberBalance


class GroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)


class GroupResponse(BaseModel):
    id: int
    name: str
    meta: dict = Field(
        default_factory=lambda: {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": str(uuid4()),
        }
    )


class GroupSummary(BaseModel):
    """Lenient view of a group: an unknown id yields no name and no members."""

    id: int
    name: Optional[str] = None
    members: list[MemberBalance] = Field(default_factory=list)
    balance_sum: int = 0
