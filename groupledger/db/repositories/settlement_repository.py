from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.models import Settlement


class SettlementRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(
        self, group_id: int, from_address: str, to_address: str, amount: int
    ) -> Settlement:
        position = await self.count_settlements(group_id)
        settlement = Settlement(
            group_id=group_id,
            position=position,
            from_address=from_address,
            to_address=to_address,
            amount=amount,
        )
        self.session.add(settlement)
        await self.session.flush()
        return settlement

    async def count_settlements(self, group_id: int) -> int:
        stmt = select(func.count(Settlement.id)).where(
            Settlement.group_id == group_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_settlements(self, group_id: int) -> list[Settlement]:
        stmt = (
            select(Settlement)
            .where(Settlement.group_id == group_id)
            .order_by(Settlement.position.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
