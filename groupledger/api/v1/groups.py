from fastapi import APIRouter, status

from groupledger.api.dependencies import NotifierDep, SessionDep
from groupledger.schemas.groups import GroupCreate, GroupResponse, GroupSummary
from groupledger.schemas.members import MemberBalance
from groupledger.services.ledger_engine import LedgerEngine

router = APIRouter()


@router.post(
    "", response_model=GroupResponse, status_code=status.HTTP_201_CREATED
)
async def create_group(
    group_data: GroupCreate, session: SessionDep, notifier: NotifierDep
) -> GroupResponse:
    ledger = LedgerEngine(session, notifier)
    async with ledger.transaction():
        group_id = await ledger.create_group(group_data.name)

    return GroupResponse(id=group_id, name=group_data.name)


@router.get("/{group_id}", response_model=GroupSummary)
async def get_group(
    group_id: int, session: SessionDep, notifier: NotifierDep
) -> GroupSummary:
    ledger = LedgerEngine(session, notifier)
    name = await ledger.get_group_name(group_id)
    balances = await ledger.get_balances(group_id)

    return GroupSummary(
        id=group_id,
        name=name,
        members=[
            MemberBalance(address=address, balance=balance)
            for address, balance in balances
        ],
        balance_sum=sum(balance for _, balance in balances),
    )
