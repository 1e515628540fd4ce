from groupledger.schemas.common import ErrorDetail, ErrorResponse
from groupledger.schemas.groups import GroupCreate, GroupResponse, GroupSummary
from groupledger.schemas.members import (
    MemberBalance,
    MemberCreate,
    MemberListResponse,
    MemberResponse,
)
from groupledger.schemas.notifications import (
    GroupCreated,
    LedgerNotification,
    MemberAdded,
    Notification,
    PaymentAdded,
    PaymentSettled,
)
from groupledger.schemas.payments import (
    PaymentCreate,
    PaymentListResponse,
    PaymentResponse,
)
from groupledger.schemas.settlements import (
    SettlementCreate,
    SettlementListResponse,
    SettlementRecord,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "GroupCreate",
    "GroupResponse",
    "GroupSummary",
    "MemberBalance",
    "MemberCreate",
    "MemberListResponse",
    "MemberResponse",
    "Notification",
    "GroupCreated",
    "MemberAdded",
    "PaymentAdded",
    "PaymentSettled",
    "LedgerNotification",
    "PaymentCreate",
    "PaymentListResponse",
    "PaymentResponse",
    "SettlementCreate",
    "SettlementListResponse",
    "SettlementRecord",
]
