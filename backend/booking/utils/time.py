from datetime import datetime
from zoneinfo import ZoneInfo

from ..config import get_settings


def restaurant_tz() -> ZoneInfo:
    return ZoneInfo(get_settings().timezone)


def to_restaurant_naive(dt: datetime) -> datetime:
    """Aware datetimes are converted to restaurant local time; naive ones are taken as already local."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(restaurant_tz()).replace(tzinfo=None)
