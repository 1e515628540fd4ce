from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.base import BIGINT_MAX, BIGINT_MIN
from groupledger.db.models import GroupMember
from groupledger.exceptions import BalanceOutOfRangeException


class MemberRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_member(
        self, group_id: int, address: str, position: int
    ) -> GroupMember:
        member = GroupMember(
            group_id=group_id, address=address, position=position, balance=0
        )
        self.session.add(member)
        await self.session.flush()
        return member

    async def get_member(self, group_id: int, address: str) -> Optional[GroupMember]:
        stmt = select(GroupMember).where(
            (GroupMember.group_id == group_id) & (GroupMember.address == address)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_members(self, group_id: int) -> int:
        stmt = select(func.count(GroupMember.id)).where(
            GroupMember.group_id == group_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_members(self, group_id: int) -> list[GroupMember]:
        stmt = (
            select(GroupMember)
            .where(GroupMember.group_id == group_id)
            .order_by(GroupMember.position.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_addresses(self, group_id: int) -> list[str]:
        stmt = (
            select(GroupMember.address)
            .where(GroupMember.group_id == group_id)
            .order_by(GroupMember.position.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_balance(self, group_id: int, address: str) -> int:
        stmt = select(GroupMember.balance).where(
            (GroupMember.group_id == group_id) & (GroupMember.address == address)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() or 0

    async def apply_deltas(self, deltas: dict[int, int]) -> None:
        """
        Apply balance deltas keyed by membership row id, flushed as one unit.

        Every resulting balance is range-checked before any is assigned.
        """
        if not deltas:
            return
        stmt = select(GroupMember).where(GroupMember.id.in_(list(deltas)))
        result = await self.session.execute(stmt)
        members = list(result.scalars().all())

        updated = {member.id: member.balance + deltas[member.id] for member in members}
        for member in members:
            if not BIGINT_MIN <= updated[member.id] <= BIGINT_MAX:
                raise BalanceOutOfRangeException(
                    member.group_id, member.address, updated[member.id]
                )

        for member in members:
            member.balance = updated[member.id]
        await self.session.flush()
