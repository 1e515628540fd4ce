from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.models import Group


class GroupRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_highest_id(self) -> int:
        stmt = select(func.coalesce(func.max(Group.id), 0))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create_group(self, group_id: int, name: str) -> Group:
        group = Group(id=group_id, name=name)
        self.session.add(group)
        await self.session.flush()
        return group

    async def get_by_id(self, group_id: int) -> Optional[Group]:
        stmt = select(Group).where(Group.id == group_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
