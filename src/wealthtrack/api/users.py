import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from wealthtrack.api.deps import get_db, resolve_user
from wealthtrack.api.schemas.users import (
    CountResponse,
    HoldingsReplaceRequest,
    ProfitEventsAddRequest,
    UpdatePreferencesRequest,
    UserCreateRequest,
    UserPreferences,
    UserResponse,
    ValuationsAppendRequest,
)
from wealthtrack.db.models.user import User
from wealthtrack.db.repos.portfolio_repo import PortfolioRepo
from wealthtrack.db.repos.user_repo import UserRepo, tax_settings_of

router = APIRouter(prefix="/api/users", tags=["users"])

DbDep = Annotated[AsyncSession, Depends(get_db)]


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        preferences=UserPreferences(**(user.preferences or {})),
        tax_settings=tax_settings_of(user),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreateRequest, db: DbDep) -> UserResponse:
    repo = UserRepo(db)
    if await repo.get_by_email(body.email) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    user = await repo.create(
        email=body.email,
        name=body.name,
        preferences=body.preferences.model_dump(exclude_none=True) if body.preferences else None,
        tax_settings=body.tax_settings,
    )
    await db.commit()
    await db.refresh(user)
    return _to_response(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user: User = Depends(resolve_user)) -> UserResponse:
    return _to_response(user)


@router.patch("/{user_id}/preferences", response_model=UserResponse)
async def update_preferences(
    user_id: uuid.UUID,
    body: UpdatePreferencesRequest,
    db: DbDep,
) -> UserResponse:
    """Update display preferences and/or tax settings (the only write path for tax settings)."""
    repo = UserRepo(db)
    prefs = body.model_dump(exclude={"tax_settings"})
    user = await repo.update_preferences(user_id, tax_settings=body.tax_settings, **prefs)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    await db.commit()
    await db.refresh(user)
    return _to_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: uuid.UUID, db: DbDep) -> None:
    """Soft-delete a user."""
    deleted = await UserRepo(db).deactivate(user_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    await db.commit()


# ── Portfolio data ───────────────────────────────────────────────────────────


@router.put("/{user_id}/holdings", response_model=CountResponse)
async def replace_holdings(
    body: HoldingsReplaceRequest,
    db: DbDep,
    user: User = Depends(resolve_user),
) -> CountResponse:
    """Replace the whole position set after a repricing."""
    count = await PortfolioRepo(db).replace_holdings(user.id, body.holdings)
    await db.commit()
    return CountResponse(count=count)


@router.post("/{user_id}/valuations", response_model=CountResponse, status_code=status.HTTP_201_CREATED)
async def append_valuations(
    body: ValuationsAppendRequest,
    db: DbDep,
    user: User = Depends(resolve_user),
) -> CountResponse:
    count = await PortfolioRepo(db).append_valuations(user.id, body.points)
    await db.commit()
    return CountResponse(count=count)


@router.post("/{user_id}/profit-events", response_model=CountResponse, status_code=status.HTTP_201_CREATED)
async def add_profit_events(
    body: ProfitEventsAddRequest,
    db: DbDep,
    user: User = Depends(resolve_user),
) -> CountResponse:
    count = await PortfolioRepo(db).add_profit_events(user.id, body.events)
    await db.commit()
    return CountResponse(count=count)
