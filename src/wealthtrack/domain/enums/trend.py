from enum import Enum


class Granularity(str, Enum):
    """Calendar bucket size for return series (UTC boundaries)."""

    DAILY = "daily"
    MONTHLY = "monthly"
    YEARLY = "yearly"
