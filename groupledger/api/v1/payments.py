from fastapi import APIRouter, status

from groupledger.api.dependencies import NotifierDep, SessionDep
from groupledger.schemas.payments import (
    PaymentCreate,
    PaymentListResponse,
    PaymentResponse,
)
from groupledger.services.ledger_engine import LedgerEngine

router = APIRouter()


@router.post(
    "/{group_id}/payments",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_payment(
    group_id: int,
    payment_data: PaymentCreate,
    session: SessionDep,
    notifier: NotifierDep,
) -> PaymentResponse:
    ledger = LedgerEngine(session, notifier)
    async with ledger.transaction():
        payment = await ledger.add_payment(
            group_id,
            payment_data.payer,
            payment_data.amount,
            payment_data.description,
        )
        result = PaymentResponse.model_validate(payment)

    return result


@router.get("/{group_id}/payments", response_model=PaymentListResponse)
async def get_payments(
    group_id: int, session: SessionDep, notifier: NotifierDep
) -> PaymentListResponse:
    ledger = LedgerEngine(session, notifier)
    payments = await ledger.get_payments(group_id)
    return PaymentListResponse(
        group_id=group_id,
        payments=[PaymentResponse.model_validate(p) for p in payments],
    )
