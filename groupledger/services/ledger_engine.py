from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.models import GroupMember, Payment, Settlement
from groupledger.services.expense_splitter import ExpenseSplitter
from groupledger.services.group_registry import GroupRegistry
from groupledger.services.membership_table import MembershipTable
from groupledger.services.notifier import NotificationOutbox, Notifier
from groupledger.services.settlement_recorder import SettlementRecorder


class LedgerEngine:
    """
    Entry point for every ledger operation over one session.

    Mutating calls run inside `transaction()`, which commits on success and
    rolls back on any error. Notifications raised by the calls are queued
    and delivered only after the commit succeeds, so a rolled-back
    operation never produces one.
    """

    def __init__(self, session: AsyncSession, notifier: Notifier) -> None:
        self.session = session
        self.outbox = NotificationOutbox(notifier)
        self.registry = GroupRegistry(session, self.outbox)
        self.membership = MembershipTable(session, self.outbox, self.registry)
        self.splitter = ExpenseSplitter(
            session, self.outbox, self.registry, self.membership
        )
        self.recorder = SettlementRecorder(
            session, self.outbox, self.registry, self.membership
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["LedgerEngine"]:
        try:
            yield self
            await self.session.commit()
        except Exception:
            self.outbox.discard()
            await self.session.rollback()
            raise
        self.outbox.publish()

    async def create_group(self, name: str) -> int:
        return await self.registry.create_group(name)

    async def get_group_name(self, group_id: int) -> Optional[str]:
        return await self.registry.get_group_name(group_id)

    async def add_member(self, group_id: int, address: str) -> GroupMember:
        return await self.membership.add_member(group_id, address)

    async def get_members(self, group_id: int) -> list[str]:
        return await self.membership.get_members(group_id)

    async def get_balance(self, group_id: int, address: str) -> int:
        return await self.membership.get_balance(group_id, address)

    async def get_balances(self, group_id: int) -> list[tuple[str, int]]:
        return await self.membership.get_balances(group_id)

    async def add_payment(
        self,
        group_id: int,
        payer: str,
        amount: int,
        description: Optional[str] = None,
    ) -> Payment:
        return await self.splitter.add_payment(group_id, payer, amount, description)

    async def get_payments(self, group_id: int) -> list[Payment]:
        return await self.splitter.get_payments(group_id)

    async def settle(
        self, group_id: int, from_address: str, to_address: str, amount: int
    ) -> Settlement:
        return await self.recorder.settle(group_id, from_address, to_address, amount)

    async def get_settlements(self, group_id: int) -> list[tuple[str, str, int]]:
        return await self.recorder.get_settlements(group_id)
