from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel

# Exact in Python, a plain number in JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def as_decimal(amount: Decimal | float | int) -> Decimal:
    """Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")."""
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


class DomainModel(BaseModel):
    """Immutable domain record, serialized with camelCase keys for the dashboard."""

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}
