from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from groupledger.schemas.members import Address


class PaymentCreate(BaseModel):
    payer: Address
    # Positivity is a ledger rule, checked by the splitter.
    amount: int
    description: Optional[str] = Field(default=None, max_length=255)


class PaymentResponse(BaseModel):
    group_id: int
    payer: str
    amount: int
    description: Optional[str] = None
    member_count: int
    share: int
    remainder: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentListResponse(BaseModel):
    group_id: int
    payments: list[PaymentResponse] = Field(default_factory=list)
