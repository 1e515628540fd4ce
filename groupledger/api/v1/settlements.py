from fastapi import APIRouter, status

from groupledger.api.dependencies import NotifierDep, SessionDep
from groupledger.schemas.settlements import (
    SettlementCreate,
    SettlementListResponse,
    SettlementRecord,
)
from groupledger.services.ledger_engine import LedgerEngine

router = APIRouter()


@router.post(
    "/{group_id}/settlements",
    response_model=SettlementRecord,
    status_code=status.HTTP_201_CREATED,
)
async def settle(
    group_id: int,
    settlement_data: SettlementCreate,
    session: SessionDep,
    notifier: NotifierDep,
) -> SettlementRecord:
    ledger = LedgerEngine(session, notifier)
    async with ledger.transaction():
        settlement = await ledger.settle(
            group_id,
            settlement_data.from_address,
            settlement_data.to_address,
            settlement_data.amount,
        )
        result = SettlementRecord.model_validate(settlement)

    return result


@router.get("/{group_id}/settlements", response_model=SettlementListResponse)
async def get_settlements(
    group_id: int, session: SessionDep, notifier: NotifierDep
) -> SettlementListResponse:
    ledger = LedgerEngine(session, notifier)
    settlements = await ledger.get_settlements(group_id)
    return SettlementListResponse(
        group_id=group_id,
        settlements=[
            SettlementRecord(from_address=from_address, to_address=to_address, amount=amount)
            for from_address, to_address, amount in settlements
        ],
    )
