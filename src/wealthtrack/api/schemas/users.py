import uuid
from datetime import datetime

from wealthtrack.api.schemas.base import CamelModel
from wealthtrack.domain.models.portfolio import Holding, ValuationPoint
from wealthtrack.domain.models.tax import ProfitEvent, TaxSettings


class UserPreferences(CamelModel):
    language: str | None = None
    currency: str | None = None
    theme: str | None = None
    timezone: str | None = None
    date_format: str | None = None
    number_format: str | None = None


class UserCreateRequest(CamelModel):
    email: str
    name: str
    preferences: UserPreferences | None = None
    tax_settings: TaxSettings | None = None


class UpdatePreferencesRequest(UserPreferences):
    tax_settings: TaxSettings | None = None  # Replaces stored settings when given


class UserResponse(CamelModel):
    id: uuid.UUID
    email: str
    name: str
    preferences: UserPreferences
    tax_settings: TaxSettings | None = None
    created_at: datetime
    updated_at: datetime


class HoldingsReplaceRequest(CamelModel):
    holdings: list[Holding]


class ValuationsAppendRequest(CamelModel):
    points: list[ValuationPoint]


class ProfitEventsAddRequest(CamelModel):
    events: list[ProfitEvent]


class CountResponse(CamelModel):
    count: int
