"""
Time helpers shared by models and services
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


def to_utc_isoformat(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as ISO-8601 in UTC (naive values are assumed UTC)"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()
