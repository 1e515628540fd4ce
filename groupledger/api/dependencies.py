from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from groupledger.db.session import AsyncSessionLocal
from groupledger.services.notifier import Notifier, log_notification

notifier = Notifier([log_notification])


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


def get_notifier() -> Notifier:
    return notifier


SessionDep = Annotated[AsyncSession, Depends(get_session)]
NotifierDep = Annotated[Notifier, Depends(get_notifier)]
