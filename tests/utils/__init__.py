from tests.utils.factories import (
    AddressFactory,
    GroupFactory,
    PaymentFactory,
    SettlementFactory,
)
from tests.utils.helpers import (
    balance_sum,
    create_group_via_api,
    create_group_with_members,
    get_balances_via_api,
    run_in_transaction,
)

__all__ = [
    "AddressFactory",
    "GroupFactory",
    "PaymentFactory",
    "SettlementFactory",
    "balance_sum",
    "create_group_via_api",
    "create_group_with_members",
    "get_balances_via_api",
    "run_in_transaction",
]
