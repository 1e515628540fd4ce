import logging
from collections import defaultdict

from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.models import Settlement
from groupledger.db.repositories import MemberRepository, SettlementRepository
from groupledger.db.base import BIGINT_MAX
from groupledger.exceptions import (
    AmountOutOfRangeException,
    FromNotMemberException,
    NonPositiveAmountException,
    ToNotMemberException,
)
from groupledger.metrics import settlements_total
from groupledger.schemas.notifications import PaymentSettled
from groupledger.services.group_registry import GroupRegistry
from groupledger.services.membership_table import MembershipTable
from groupledger.services.notifier import NotificationOutbox

logger = logging.getLogger(__name__)


class SettlementRecorder:
    def __init__(
        self,
        session: AsyncSession,
        outbox: NotificationOutbox,
        registry: GroupRegistry,
        membership: MembershipTable,
    ) -> None:
        self.member_repo = MemberRepository(session)
        self.settlement_repo = SettlementRepository(session)
        self.outbox = outbox
        self.registry = registry
        self.membership = membership

    async def settle(
        self, group_id: int, from_address: str, to_address: str, amount: int
    ) -> Settlement:
        """Record a direct transfer: credit the sender, debit the recipient."""
        await self.registry.ensure_group(group_id)
        sender = await self.membership.ensure_member(
            group_id, from_address, FromNotMemberException
        )
        recipient = await self.membership.ensure_member(
            group_id, to_address, ToNotMemberException
        )
        if amount <= 0:
            raise NonPositiveAmountException(amount)
        if amount > BIGINT_MAX:
            raise AmountOutOfRangeException(amount, BIGINT_MAX)

        deltas: dict[int, int] = defaultdict(int)
        deltas[sender.id] += amount
        deltas[recipient.id] -= amount
        await self.member_repo.apply_deltas(dict(deltas))

        settlement = await self.settlement_repo.append(
            group_id=group_id,
            from_address=from_address,
            to_address=to_address,
            amount=amount,
        )

        settlements_total.inc()
        logger.info(
            "Recorded settlement group_id=%s from=%s to=%s amount=%s",
            group_id,
            from_address,
            to_address,
            amount,
            extra={
                "group_id": group_id,
                "from_address": from_address,
                "to_address": to_address,
                "amount": amount,
            },
        )
        self.outbox.emit(
            PaymentSettled(
                group_id=group_id,
                from_address=from_address,
                to_address=to_address,
                amount=amount,
            )
        )
        return settlement

    async def get_settlements(self, group_id: int) -> list[tuple[str, str, int]]:
        if not await self.registry.is_valid_group(group_id):
            return []
        settlements = await self.settlement_repo.list_settlements(group_id)
        return [(s.from_address, s.to_address, s.amount) for s in settlements]
