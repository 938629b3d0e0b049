import uuid

from wealthtrack.db.repos.user_repo import UserRepo, tax_settings_of
from wealthtrack.domain.models.tax import TaxSettings


class TestUserRepo:
    async def test_create_user(self, session):
        repo = UserRepo(session)
        user = await repo.create(email="ana@example.com", name="Ana")
        await session.commit()

        assert user.id is not None
        assert user.is_active is True
        assert user.preferences == {}
        assert tax_settings_of(user) is None

    async def test_unknown_preference_keys_dropped(self, session):
        repo = UserRepo(session)
        user = await repo.create(
            email="ana@example.com", name="Ana", preferences={"currency": "EUR", "shoe_size": 38},
        )
        assert user.preferences == {"currency": "EUR"}

    async def test_get_by_id_and_email(self, session):
        repo = UserRepo(session)
        user = await repo.create(email="ana@example.com", name="Ana")
        await session.commit()

        assert (await repo.get_by_id(user.id)).email == "ana@example.com"
        assert (await repo.get_by_email("ana@example.com")).id == user.id

    async def test_get_missing_returns_none(self, session):
        repo = UserRepo(session)
        assert await repo.get_by_id(uuid.uuid4()) is None
        assert await repo.get_by_email("nobody@example.com") is None

    async def test_tax_settings_stored_and_loaded(self, session):
        repo = UserRepo(session)
        settings = TaxSettings.model_validate({"stock": {"capitalGainsTax": 20, "dividendTax": 15}})
        user = await repo.create(email="ana@example.com", name="Ana", tax_settings=settings)
        await session.commit()

        assert user.tax_settings == {"stock": {"capitalGainsTax": 20.0, "dividendTax": 15.0}}
        assert tax_settings_of(user) == settings


class TestUpdatePreferences:
    async def test_merge_preferences(self, session):
        repo = UserRepo(session)
        user = await repo.create(email="ana@example.com", name="Ana", preferences={"currency": "EUR"})
        await session.commit()

        updated = await repo.update_preferences(user.id, theme="dark", language=None)
        await session.commit()

        assert updated.preferences == {"currency": "EUR", "theme": "dark"}

    async def test_replace_tax_settings(self, session):
        repo = UserRepo(session)
        user = await repo.create(
            email="ana@example.com",
            name="Ana",
            tax_settings=TaxSettings.model_validate({"stock": {"capitalGainsTax": 20}}),
        )
        await session.commit()

        new_settings = TaxSettings.model_validate({"deposit": {"interestTax": 19}})
        updated = await repo.update_preferences(user.id, tax_settings=new_settings)
        await session.commit()

        assert tax_settings_of(updated) == new_settings
        assert tax_settings_of(updated).stock is None

    async def test_tax_settings_kept_when_not_given(self, session):
        repo = UserRepo(session)
        settings = TaxSettings.model_validate({"stock": {"capitalGainsTax": 20}})
        user = await repo.create(email="ana@example.com", name="Ana", tax_settings=settings)
        await session.commit()

        updated = await repo.update_preferences(user.id, currency="USD")
        assert tax_settings_of(updated) == settings

    async def test_missing_user(self, session):
        assert await UserRepo(session).update_preferences(uuid.uuid4(), theme="dark") is None


class TestDeactivate:
    async def test_deactivated_user_hidden(self, session):
        repo = UserRepo(session)
        user = await repo.create(email="ana@example.com", name="Ana")
        await session.commit()

        assert await repo.deactivate(user.id) is True
        await session.commit()

        assert await repo.get_by_id(user.id) is None
        assert await repo.get_by_email("ana@example.com") is None

    async def test_deactivate_missing(self, session):
        assert await UserRepo(session).deactivate(uuid.uuid4()) is False
