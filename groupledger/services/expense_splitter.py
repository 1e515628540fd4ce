import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.models import Payment
from groupledger.db.repositories import MemberRepository, PaymentRepository
from groupledger.db.base import BIGINT_MAX
from groupledger.exceptions import (
    AmountOutOfRangeException,
    EmptyGroupException,
    NonPositiveAmountException,
    PayerNotMemberException,
)
from groupledger.metrics import payment_units_dropped_total, payments_total
from groupledger.schemas.notifications import PaymentAdded
from groupledger.services.group_registry import GroupRegistry
from groupledger.services.membership_table import MembershipTable
from groupledger.services.notifier import NotificationOutbox

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Split:
    share: int
    remainder: int
    payer_credit: int


def split_amount(amount: int, member_count: int) -> Split:
    """
    Split an amount equally with truncating integer division.

    Rounding contract: the remainder is dropped. Every other member is debited
    `share` and the payer is credited `share * (member_count - 1)`, so the
    group's balances always sum to exactly zero. The `remainder` units are
    attributed to nobody.
    """
    share = amount // member_count
    remainder = amount - share * member_count
    return Split(
        share=share,
        remainder=remainder,
        payer_credit=share * (member_count - 1),
    )


class ExpenseSplitter:
    def __init__(
        self,
        session: AsyncSession,
        outbox: NotificationOutbox,
        registry: GroupRegistry,
        membership: MembershipTable,
    ) -> None:
        self.member_repo = MemberRepository(session)
        self.payment_repo = PaymentRepository(session)
        self.outbox = outbox
        self.registry = registry
        self.membership = membership

    async def add_payment(
        self,
        group_id: int,
        payer: str,
        amount: int,
        description: Optional[str] = None,
    ) -> Payment:
        await self.registry.ensure_group(group_id)
        payer_member = await self.membership.ensure_member(
            group_id, payer, PayerNotMemberException
        )
        if amount <= 0:
            raise NonPositiveAmountException(amount)
        if amount > BIGINT_MAX:
            raise AmountOutOfRangeException(amount, BIGINT_MAX)

        members = await self.member_repo.list_members(group_id)
        if not members:
            raise EmptyGroupException(group_id)

        split = split_amount(amount, len(members))
        deltas = {
            member.id: -split.share
            for member in members
            if member.id != payer_member.id
        }
        deltas[payer_member.id] = split.payer_credit
        await self.member_repo.apply_deltas(deltas)

        payment = await self.payment_repo.create_payment(
            group_id=group_id,
            payer=payer,
            amount=amount,
            member_count=len(members),
            share=split.share,
            remainder=split.remainder,
            description=description,
        )

        payments_total.inc()
        if split.remainder:
            payment_units_dropped_total.inc(split.remainder)
            logger.info(
                "Dropped split remainder group_id=%s payer=%s remainder=%s",
                group_id,
                payer,
                split.remainder,
                extra={
                    "group_id": group_id,
                    "address": payer,
                    "remainder": split.remainder,
                },
            )
        logger.info(
            "Recorded payment group_id=%s payer=%s amount=%s share=%s members=%s",
            group_id,
            payer,
            amount,
            split.share,
            len(members),
            extra={
                "group_id": group_id,
                "address": payer,
                "amount": amount,
                "share": split.share,
                "member_count": len(members),
            },
        )
        self.outbox.emit(
            PaymentAdded(
                group_id=group_id,
                payer=payer,
                amount=amount,
                description=description,
            )
        )
        return payment

    async def get_payments(self, group_id: int) -> list[Payment]:
        if not await self.registry.is_valid_group(group_id):
            return []
        return await self.payment_repo.list_payments(group_id)
