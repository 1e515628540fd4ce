import pytest

from groupledger.db.base import BIGINT_MAX
from groupledger.exceptions import (
    AmountOutOfRangeException,
    BalanceOutOfRangeException,
    FromNotMemberException,
    InvalidGroupException,
    NonPositiveAmountException,
    ToNotMemberException,
)
from groupledger.schemas.notifications import PaymentSettled
from groupledger.services.ledger_engine import LedgerEngine
from tests.utils import balance_sum, create_group_with_members, run_in_transaction


@pytest.mark.unit
class TestSettlementRecorder:
    async def test_settle_back_clears_balances(
        self, ledger: LedgerEngine, alice: str, bob: str
    ) -> None:
        group_id = await create_group_with_members(ledger, [alice, bob])
        await run_in_transaction(
            ledger, ledger.add_payment, group_id, alice, 100, "Dinner"
        )
        assert await ledger.get_balance(group_id, alice) == 50
        assert await ledger.get_balance(group_id, bob) == -50

        await run_in_transaction(ledger, ledger.settle, group_id, bob, alice, 50)

        assert await ledger.get_balance(group_id, bob) == 0
        assert await ledger.get_balance(group_id, alice) == 0

    async def test_settle_is_pairwise_sum_neutral(
        self,
        ledger: LedgerEngine,
        alice: str,
        bob: str,
        carol: str,
    ) -> None:
        group_id = await create_group_with_members(
            ledger, [alice, bob, carol]
        )
        await run_in_transaction(
            ledger, ledger.add_payment, group_id, carol, 90, "Tickets"
        )
        before = dict(await ledger.get_balances(group_id))

        await run_in_transaction(ledger, ledger.settle, group_id, alice, bob, 75)

        after = dict(await ledger.get_balances(group_id))
        assert after[alice] == before[alice] + 75
        assert after[bob] == before[bob] - 75
        assert after[carol] == before[carol]
        assert await balance_sum(ledger, group_id) == 0

    async def test_settlement_log_matches_call_order(
        self,
        ledger: LedgerEngine,
        alice: str,
        bob: str,
        carol: str,
    ) -> None:
        group_id = await create_group_with_members(
            ledger, [alice, bob, carol]
        )
        calls = [(bob, alice, 10), (carol, alice, 20), (alice, bob, 5), (bob, alice, 10)]

        for i, (from_address, to_address, amount) in enumerate(calls):
            await run_in_transaction(
                ledger, ledger.settle, group_id, from_address, to_address, amount
            )
            assert await ledger.get_settlements(group_id) == calls[: i + 1]

    async def test_settle_emits_notification(
        self,
        ledger: LedgerEngine,
        notifications: list,
        alice: str,
        bob: str,
    ) -> None:
        group_id = await create_group_with_members(ledger, [alice, bob])
        notifications.clear()

        await run_in_transaction(ledger, ledger.settle, group_id, bob, alice, 40)

        assert len(notifications) == 1
        notification = notifications[0]
        assert isinstance(notification, PaymentSettled)
        assert (
            notification.group_id,
            notification.from_address,
            notification.to_address,
            notification.amount,
        ) == (group_id, bob, alice, 40)

    async def test_self_settlement_logged_without_balance_change(
        self, ledger: LedgerEngine, alice: str, bob: str
    ) -> None:
        group_id = await create_group_with_members(ledger, [alice, bob])

        await run_in_transaction(ledger, ledger.settle, group_id, alice, alice, 30)

        assert await ledger.get_balance(group_id, alice) == 0
        assert await ledger.get_settlements(group_id) == [(alice, alice, 30)]

    async def test_checks_run_in_order(
        self,
        ledger: LedgerEngine,
        notifications: list,
        alice: str,
        bob: str,
    ) -> None:
        group_id = await create_group_with_members(ledger, [alice])
        notifications.clear()
        stranger = "addr_stranger"

        with pytest.raises(InvalidGroupException):
            await run_in_transaction(ledger, ledger.settle, 99, bob, stranger, 0)
        with pytest.raises(FromNotMemberException):
            await run_in_transaction(
                ledger, ledger.settle, group_id, bob, stranger, 0
            )
        with pytest.raises(ToNotMemberException):
            await run_in_transaction(
                ledger, ledger.settle, group_id, alice, stranger, 0
            )
        with pytest.raises(NonPositiveAmountException):
            await run_in_transaction(
                ledger, ledger.settle, group_id, alice, alice, 0
            )

        assert notifications == []
        assert await ledger.get_settlements(group_id) == []
        assert await ledger.get_balance(group_id, alice) == 0

    async def test_reads_default_for_unknown_group(
        self, ledger: LedgerEngine
    ) -> None:
        assert await ledger.get_settlements(99) == []
        assert await ledger.get_settlements(2**64) == []

    async def test_amount_beyond_storage_range_rejected(
        self, ledger: LedgerEngine, alice: str, bob: str
    ) -> None:
        group_id = await create_group_with_members(ledger, [alice, bob])

        with pytest.raises(AmountOutOfRangeException) as exc_info:
            await run_in_transaction(
                ledger, ledger.settle, group_id, alice, bob, BIGINT_MAX + 1
            )

        assert exc_info.value.details == {
            "amount": BIGINT_MAX + 1,
            "limit": BIGINT_MAX,
        }
        assert await ledger.get_settlements(group_id) == []

    async def test_settlement_at_storage_limits(
        self,
        ledger: LedgerEngine,
        notifications: list,
        alice: str,
        bob: str,
    ) -> None:
        group_id = await create_group_with_members(ledger, [alice, bob])

        await run_in_transaction(
            ledger, ledger.settle, group_id, alice, bob, BIGINT_MAX
        )
        notifications.clear()

        with pytest.raises(BalanceOutOfRangeException) as exc_info:
            await run_in_transaction(ledger, ledger.settle, group_id, alice, bob, 1)

        assert exc_info.value.details == {
            "group_id": group_id,
            "address": alice,
            "balance": BIGINT_MAX + 1,
        }
        assert await ledger.get_balances(group_id) == [
            (alice, BIGINT_MAX),
            (bob, -BIGINT_MAX),
        ]
        assert await ledger.get_settlements(group_id) == [(alice, bob, BIGINT_MAX)]
        assert await balance_sum(ledger, group_id) == 0
        assert notifications == []
