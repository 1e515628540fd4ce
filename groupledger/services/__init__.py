from groupledger.services.expense_splitter import ExpenseSplitter, split_amount
from groupledger.services.group_registry import GroupRegistry
from groupledger.services.ledger_engine import LedgerEngine
from groupledger.services.membership_table import MembershipTable
from groupledger.services.notifier import (
    NotificationOutbox,
    Notifier,
    log_notification,
)
from groupledger.services.settlement_recorder import SettlementRecorder

__all__ = [
    "ExpenseSplitter",
    "GroupRegistry",
    "LedgerEngine",
    "MembershipTable",
    "NotificationOutbox",
    "Notifier",
    "SettlementRecorder",
    "log_notification",
    "split_amount",
]
