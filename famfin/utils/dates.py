from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Treats naive datetimes as UTC (SQLite hands them back without tzinfo)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_date(value: Union[date, datetime, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def month_start(d: date) -> date:
    return d.replace(day=1)


def shift_month(d: date, months: int) -> date:
    """First day of the month `months` away from `d` (negative goes back)."""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_bounds(today: Optional[date] = None, offset: int = 0) -> Tuple[date, date]:
    """Returns (start, end_exclusive) of the calendar month `offset` months from `today`."""
    today = today or date.today()
    start = shift_month(today, offset)
    return start, shift_month(start, 1)


def month_label(d: date) -> str:
    return d.strftime("%b %y")


def to_datetime(value: Union[datetime, str]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
