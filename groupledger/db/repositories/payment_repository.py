from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.models import Payment


class PaymentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_payment(
        self,
        group_id: int,
        payer: str,
        amount: int,
        member_count: int,
        share: int,
        remainder: int,
        description: Optional[str] = None,
    ) -> Payment:
        position = await self.count_payments(group_id)
        payment = Payment(
            group_id=group_id,
            position=position,
            payer=payer,
            amount=amount,
            description=description,
            member_count=member_count,
            share=share,
            remainder=remainder,
        )
        self.session.add(payment)
        await self.session.flush()
        return payment

    async def count_payments(self, group_id: int) -> int:
        stmt = select(func.count(Payment.id)).where(Payment.group_id == group_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_payments(self, group_id: int) -> list[Payment]:
        stmt = (
            select(Payment)
            .where(Payment.group_id == group_id)
            .order_by(Payment.position.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
