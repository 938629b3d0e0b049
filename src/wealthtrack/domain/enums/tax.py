from enum import Enum


class ProfitType(str, Enum):
    """Nature of a taxable event."""

    CAPITAL_GAINS = "capital_gains"
    DIVIDEND = "dividend"
    INTEREST = "interest"
    RENTAL_INCOME = "rental_income"
