import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wealthtrack.db.models.user import User
from wealthtrack.domain.models.tax import TaxSettings

PREFERENCE_KEYS = ("language", "currency", "theme", "timezone", "date_format", "number_format")


def _serialize(tax_settings: TaxSettings) -> dict:
    # JSON column: rates are written as numbers and read back as Decimal
    return tax_settings.model_dump(mode="json", by_alias=True, exclude_none=True)


def tax_settings_of(user: User) -> Optional[TaxSettings]:
    """Deserialize a user's stored tax settings; None when never configured."""
    if user.tax_settings is None:
        return None
    return TaxSettings.model_validate(user.tax_settings)


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.id == user_id, User.is_active.is_(True))
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.email == email, User.is_active.is_(True))
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        email: str,
        name: str,
        preferences: Optional[dict] = None,
        tax_settings: Optional[TaxSettings] = None,
    ) -> User:
        user = User(
            email=email,
            name=name,
            preferences={k: v for k, v in (preferences or {}).items() if k in PREFERENCE_KEYS},
            tax_settings=_serialize(tax_settings) if tax_settings else None,
        )
        self._session.add(user)
        await self._session.flush()
        return user

    async def update_preferences(
        self,
        user_id: uuid.UUID,
        tax_settings: Optional[TaxSettings] = None,
        **preferences,
    ) -> Optional[User]:
        """Merge display preferences and replace tax settings wholesale.

        Only non-None preference values with a known key are applied. This is
        the only write path for a user's tax settings.
        """
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        merged = dict(user.preferences or {})
        for key, value in preferences.items():
            if value is not None and key in PREFERENCE_KEYS:
                merged[key] = value
        # New dict instances so the JSON columns are flagged dirty
        user.preferences = merged
        if tax_settings is not None:
            user.tax_settings = _serialize(tax_settings)
        await self._session.flush()
        return user

    async def deactivate(self, user_id: uuid.UUID) -> bool:
        """Soft-delete: the user disappears from every lookup."""
        user = await self.get_by_id(user_id)
        if user is None:
            return False
        user.is_active = False
        await self._session.flush()
        return True
