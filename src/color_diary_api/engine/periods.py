"""Calendar windows used by the diary views."""

import calendar
from datetime import date, timedelta

from color_diary_api.core.exceptions import ValidationError
from color_diary_api.schemas.analysis import MixturePeriod


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def parse_month(value: str) -> date:
    """First day of a ``YYYY-MM`` month."""
    try:
        year, month = (int(part) for part in value.split("-"))
        return date(year, month, 1)
    except ValueError:
        raise ValidationError(f"Invalid month '{value}': expected YYYY-MM", field="month") from None


def period_range(period: MixturePeriod | str, as_of: date) -> tuple[date | None, date]:
    """Date window of a mixture period ending at ``as_of``.

    The start is None for the all-time period.
    """
    period = MixturePeriod(period)
    if period is MixturePeriod.ALL:
        return None, as_of
    if period is MixturePeriod.WEEKLY:
        return week_bounds(as_of)[0], as_of
    if period is MixturePeriod.MONTHLY:
        return as_of.replace(day=1), as_of
    return as_of.replace(month=1, day=1), as_of
