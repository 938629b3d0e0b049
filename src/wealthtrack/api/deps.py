import uuid
from typing import AsyncGenerator

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wealthtrack.container import Container
from wealthtrack.db.models.user import User
from wealthtrack.db.repos.user_repo import UserRepo


@inject
async def get_db(
    session_factory: async_sessionmaker[AsyncSession] = Depends(Provide[Container.session_factory]),
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


async def resolve_user(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> User:
    """Load an active user from the path or query parameter, 404 otherwise."""
    user = await UserRepo(db).get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
