from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from roozh.core.config import DEFAULT_TIMEZONE
from roozh.models.errors import InvalidArgumentError
from roozh.utils.intercalation import (
    jalali_to_jdn,
    jdn_to_jalali,
    month_length,
)
from roozh.utils.julian_day import gregorian_to_jdn, jdn_to_gregorian


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> tuple[int, int, int]:
    return jdn_to_jalali(gregorian_to_jdn(gy, gm, gd))


def jalali_to_gregorian(jy: int, jm: int, jd: int) -> tuple[int, int, int]:
    if not 1 <= jd <= month_length(jy, jm):
        raise InvalidArgumentError(f"Invalid Jalali date: {jy}/{jm}/{jd}")
    return jdn_to_gregorian(jalali_to_jdn(jy, jm, jd))


def to_jalali_datetime(value: str, tz: str = DEFAULT_TIMEZONE) -> str:
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        return value

    if dt.tzinfo is not None:
        dt = dt.astimezone(ZoneInfo(tz))

    jy, jm, jd = gregorian_to_jalali(dt.year, dt.month, dt.day)
    return f"{jy:04d}/{jm:02d}/{jd:02d} {dt:%H:%M}"


def jalali_month_days(jy: int, jm: int) -> int:
    return month_length(jy, jm)


def jalali_today(tz: str = DEFAULT_TIMEZONE) -> tuple[int, int, int]:
    dt = datetime.now(ZoneInfo(tz))
    return gregorian_to_jalali(dt.year, dt.month, dt.day)


def to_jalali_month(value: str) -> str:
    try:
        year_str, month_str = value.split("-")
        gy = int(year_str)
        gm = int(month_str)
    except ValueError:
        return value
    if not 1 <= gm <= 12:
        return value

    jy, jm, _ = gregorian_to_jalali(gy, gm, 1)
    return f"{jy:04d}/{jm:02d}"
