from datetime import datetime, timezone
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from groupledger.core.enums import NotificationType


class Notification(BaseModel):
    group_id: int
    emitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class GroupCreated(Notification):
    event_type: Literal[NotificationType.GROUP_CREATED] = NotificationType.GROUP_CREATED
    name: str


class MemberAdded(Notification):
    event_type: Literal[NotificationType.MEMBER_ADDED] = NotificationType.MEMBER_ADDED
    address: str


class PaymentAdded(Notification):
    event_type: Literal[NotificationType.PAYMENT_ADDED] = NotificationType.PAYMENT_ADDED
    payer: str
    amount: int
    description: Optional[str] = None


class PaymentSettled(Notification):
    event_type: Literal[NotificationType.PAYMENT_SETTLED] = (
        NotificationType.PAYMENT_SETTLED
    )
    from_address: str
    to_address: str
    amount: int


LedgerNotification = Union[GroupCreated, MemberAdded, PaymentAdded, PaymentSettled]
