from prometheus_client import Counter

groups_created_total = Counter(
    "ledger_groups_created_total", "Total groups created"
)

members_added_total = Counter(
    "ledger_members_added_total", "Total memberships created"
)

payments_total = Counter(
    "ledger_payments_total", "Total split payments recorded"
)

payment_units_dropped_total = Counter(
    "ledger_payment_units_dropped_total",
    "Currency units left unassigned by truncating payment splits",
)

settlements_total = Counter(
    "ledger_settlements_total", "Total settlements recorded"
)

rejected_operations_total = Counter(
    "ledger_rejected_operations_total",
    "Operations rejected by precondition checks",
    ["error_code"],
)
