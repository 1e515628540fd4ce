from fastapi import APIRouter, status

from groupledger.api.dependencies import NotifierDep, SessionDep
from groupledger.schemas.members import (
    MemberCreate,
    MemberListResponse,
    MemberResponse,
)
from groupledger.services.ledger_engine import LedgerEngine

router = APIRouter()


@router.post(
    "/{group_id}/members",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_member(
    group_id: int,
    member_data: MemberCreate,
    session: SessionDep,
    notifier: NotifierDep,
) -> MemberResponse:
    ledger = LedgerEngine(session, notifier)
    async with ledger.transaction():
        member = await ledger.add_member(group_id, member_data.address)

    return MemberResponse(
        group_id=member.group_id, address=member.address, balance=member.balance
    )


@router.get("/{group_id}/members", response_model=MemberListResponse)
async def get_members(
    group_id: int, session: SessionDep, notifier: NotifierDep
) -> MemberListResponse:
    ledger = LedgerEngine(session, notifier)
    members = await ledger.get_members(group_id)
    return MemberListResponse(group_id=group_id, members=members)


@router.get("/{group_id}/members/{address}/balance", response_model=MemberResponse)
async def get_balance(
    group_id: int, address: str, session: SessionDep, notifier: NotifierDep
) -> MemberResponse:
    ledger = LedgerEngine(session, notifier)
    balance = await ledger.get_balance(group_id, address)
    return MemberResponse(group_id=group_id, address=address, balance=balance)
