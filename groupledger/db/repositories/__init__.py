from groupledger.db.repositories.group_repository import GroupRepository
from groupledger.db.repositories.member_repository import MemberRepository
from groupledger.db.repositories.payment_repository import PaymentRepository
from groupledger.db.repositories.settlement_repository import SettlementRepository

__all__ = [
    "GroupRepository",
    "MemberRepository",
    "PaymentRepository",
    "SettlementRepository",
]
