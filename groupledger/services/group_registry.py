import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.repositories import GroupRepository
from groupledger.exceptions import InvalidGroupException
from groupledger.metrics import groups_created_total
from groupledger.schemas.notifications import GroupCreated
from groupledger.services.notifier import NotificationOutbox

logger = logging.getLogger(__name__)


class GroupRegistry:
    def __init__(self, session: AsyncSession, outbox: NotificationOutbox) -> None:
        self.group_repo = GroupRepository(session)
        self.outbox = outbox

    async def create_group(self, name: str) -> int:
        """Allocate the next sequential group id (starting at 1) and store its name."""
        group_id = await self.group_repo.get_highest_id() + 1
        group = await self.group_repo.create_group(group_id, name)

        groups_created_total.inc()
        logger.info(
            "Created group group_id=%s",
            group.id,
            extra={"group_id": group.id, "group_name": group.name},
        )
        self.outbox.emit(GroupCreated(group_id=group.id, name=group.name))
        return group.id

    async def highest_group_id(self) -> int:
        return await self.group_repo.get_highest_id()

    async def is_valid_group(self, group_id: int) -> bool:
        return 1 <= group_id <= await self.group_repo.get_highest_id()

    async def ensure_group(self, group_id: int) -> None:
        if not await self.is_valid_group(group_id):
            raise InvalidGroupException(group_id)

    async def get_group_name(self, group_id: int) -> Optional[str]:
        if not await self.is_valid_group(group_id):
            return None
        group = await self.group_repo.get_by_id(group_id)
        return group.name if group else None
