import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from groupledger.exceptions import InvalidGroupException
from groupledger.schemas.notifications import GroupCreated, MemberAdded
from groupledger.services.ledger_engine import LedgerEngine


@pytest.mark.unit
class TestLedgerTransaction:
    async def test_notifications_delivered_after_commit(
        self, ledger: LedgerEngine, notifications: list, alice: str
    ) -> None:
        async with ledger.transaction():
            group_id = await ledger.create_group("Flat")
            await ledger.add_member(group_id, alice)

            assert notifications == []
            assert [type(n) for n in ledger.outbox.pending] == [
                GroupCreated,
                MemberAdded,
            ]

        assert [type(n) for n in notifications] == [GroupCreated, MemberAdded]
        assert ledger.outbox.pending == []

    async def test_rolled_back_operation_delivers_nothing(
        self, ledger: LedgerEngine, notifications: list, alice: str
    ) -> None:
        with pytest.raises(InvalidGroupException):
            async with ledger.transaction():
                group_id = await ledger.create_group("Flat")
                await ledger.add_member(group_id + 1, alice)

        assert notifications == []
        assert ledger.outbox.pending == []
        assert await ledger.registry.highest_group_id() == 0

    async def test_commit_persists_writes(
        self,
        ledger: LedgerEngine,
        session_factory: async_sessionmaker[AsyncSession],
        alice: str,
    ) -> None:
        async with ledger.transaction():
            group_id = await ledger.create_group("Flat")
            await ledger.add_member(group_id, alice)

        async with session_factory() as other_session:
            other = LedgerEngine(other_session, ledger.outbox.notifier)
            assert await other.get_members(group_id) == [alice]
