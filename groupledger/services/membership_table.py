import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.models import GroupMember
from groupledger.db.repositories import MemberRepository
from groupledger.exceptions import DuplicateMemberException, NotMemberException
from groupledger.metrics import members_added_total
from groupledger.schemas.notifications import MemberAdded
from groupledger.services.group_registry import GroupRegistry
from groupledger.services.notifier import NotificationOutbox

logger = logging.getLogger(__name__)

DUPLICATE_ADDRESS_MARKERS = ("uq_group_members_address", "group_members.address")


def _is_duplicate_address(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return any(marker in message for marker in DUPLICATE_ADDRESS_MARKERS)


class MembershipTable:
    """
    Group membership and per-member balances.

    Reads never fail: unknown groups have no members and unknown pairs have
    a zero balance. Writes go through validated accessors that raise.
    """

    def __init__(
        self,
        session: AsyncSession,
        outbox: NotificationOutbox,
        registry: GroupRegistry,
    ) -> None:
        self.member_repo = MemberRepository(session)
        self.outbox = outbox
        self.registry = registry

    async def add_member(self, group_id: int, address: str) -> GroupMember:
        await self.registry.ensure_group(group_id)

        if await self.member_repo.get_member(group_id, address) is not None:
            raise DuplicateMemberException(group_id, address)

        position = await self.member_repo.count_members(group_id)
        try:
            member = await self.member_repo.create_member(group_id, address, position)
        except IntegrityError as exc:
            # A concurrent writer added the same address after the check above.
            if _is_duplicate_address(exc):
                raise DuplicateMemberException(group_id, address) from exc
            raise

        members_added_total.inc()
        logger.info(
            "Added member group_id=%s address=%s position=%s",
            group_id,
            address,
            position,
            extra={"group_id": group_id, "address": address, "position": position},
        )
        self.outbox.emit(MemberAdded(group_id=group_id, address=address))
        return member

    async def ensure_member(
        self,
        group_id: int,
        address: str,
        error: type[NotMemberException],
    ) -> GroupMember:
        member = await self.member_repo.get_member(group_id, address)
        if member is None:
            raise error(group_id, address)
        return member

    async def get_members(self, group_id: int) -> list[str]:
        if not await self.registry.is_valid_group(group_id):
            return []
        return await self.member_repo.list_addresses(group_id)

    async def is_member(self, group_id: int, address: str) -> bool:
        if not await self.registry.is_valid_group(group_id):
            return False
        return await self.member_repo.get_member(group_id, address) is not None

    async def get_balance(self, group_id: int, address: str) -> int:
        if not await self.registry.is_valid_group(group_id):
            return 0
        return await self.member_repo.get_balance(group_id, address)

    async def get_balances(self, group_id: int) -> list[tuple[str, int]]:
        if not await self.registry.is_valid_group(group_id):
            return []
        members = await self.member_repo.list_members(group_id)
        return [(member.address, member.balance) for member in members]
