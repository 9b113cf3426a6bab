"""Jalali (Solar Hijri) intercalation after K.M. Borkowski.

See "The Persian calendar for 3000 years", Earth, Moon and Planets 74
(1996). Leap years follow a table of break points rather than a fixed
arithmetic cycle; the table covers Jalali years -61 to 3177.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from roozh.models.errors import InvalidArgumentError, OutOfRangeError
from roozh.utils.julian_day import (
    gregorian_to_jdn,
    jdn_to_gregorian,
    trunc_div,
    trunc_mod,
)

BREAKS: tuple[int, ...] = (
    -61,
    9,
    38,
    199,
    426,
    686,
    756,
    818,
    1111,
    1181,
    1210,
    1635,
    2060,
    2097,
    2192,
    2262,
    2324,
    2394,
    2456,
    3178,
)
MIN_YEAR = BREAKS[0]
MAX_YEAR = BREAKS[-1] - 1
GREGORIAN_OFFSET = 621

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JalaliYearInfo:
    year: int
    gregorian_year: int
    march_day: int
    # Years since the last leap year: 0 means this year is leap, 1 means
    # the previous one was.
    leap_position: int

    @property
    def is_leap(self) -> bool:
        return self.leap_position == 0


def _check_year(jalali_year: int) -> None:
    if jalali_year < MIN_YEAR or jalali_year > MAX_YEAR:
        _logger.warning(
            "Jalali year %s outside %s..%s", jalali_year, MIN_YEAR, MAX_YEAR
        )
        raise OutOfRangeError(
            f"Jalali year {jalali_year} is outside {MIN_YEAR}..{MAX_YEAR}"
        )


def resolve(jalali_year: int) -> JalaliYearInfo:
    """Find the leap status of ``jalali_year`` and the March day of its
    first day (Farvardin 1) in the Gregorian calendar of the same year + 621.
    """
    _check_year(jalali_year)
    gregorian_year = jalali_year + GREGORIAN_OFFSET
    leap_j = -14
    jp = BREAKS[0]
    jump = 0
    for jm in BREAKS[1:]:
        jump = jm - jp
        if jalali_year < jm:
            break
        leap_j += trunc_div(jump, 33) * 8 + trunc_div(trunc_mod(jump, 33), 4)
        jp = jm

    n = jalali_year - jp
    leap_j += trunc_div(n, 33) * 8 + trunc_div(trunc_mod(n, 33) + 3, 4)
    if trunc_mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    leap_g = (
        trunc_div(gregorian_year, 4)
        - trunc_div((trunc_div(gregorian_year, 100) + 1) * 3, 4)
        - 150
    )
    march_day = 20 + leap_j - leap_g

    if jump - n < 6:
        n = n - jump + trunc_div(jump + 4, 33) * 33
    leap = trunc_mod(trunc_mod(n + 1, 33) - 1, 4)
    if leap == -1:
        leap = 4

    return JalaliYearInfo(
        year=jalali_year,
        gregorian_year=gregorian_year,
        march_day=march_day,
        leap_position=leap,
    )


def is_leap_year(jalali_year: int) -> bool:
    return resolve(jalali_year).is_leap


def month_length(jalali_year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidArgumentError(
            f"Month must be between 1 and 12: {month}"
        )
    _check_year(jalali_year)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(jalali_year) else 29


def jalali_to_jdn(year: int, month: int, day: int) -> int:
    info = resolve(year)
    # month // 7 * (month - 7) drops one day per month after the sixth
    return (
        gregorian_to_jdn(info.gregorian_year, 3, info.march_day)
        + (month - 1) * 31
        - trunc_div(month, 7) * (month - 7)
        + day
        - 1
    )


def _from_day_of_year(year: int, k: int) -> tuple[int, int, int]:
    if k <= 185:
        return year, 1 + trunc_div(k, 31), trunc_mod(k, 31) + 1
    k -= 186
    return year, 7 + trunc_div(k, 30), trunc_mod(k, 30) + 1


def jdn_to_jalali(jdn: int) -> tuple[int, int, int]:
    gregorian_year = jdn_to_gregorian(jdn)[0]
    year = gregorian_year - GREGORIAN_OFFSET
    if year == MAX_YEAR + 1:
        # Esfand of the last covered year ends in the following March.
        info = resolve(MAX_YEAR)
        k = jdn - gregorian_to_jdn(info.gregorian_year, 3, info.march_day)
        if k >= (366 if info.is_leap else 365):
            _check_year(year)
        return _from_day_of_year(MAX_YEAR, k)
    info = resolve(year)
    k = jdn - gregorian_to_jdn(gregorian_year, 3, info.march_day)
    if k >= 0:
        return _from_day_of_year(year, k)
    # Before Farvardin 1: the date is in the second half of the previous
    # year, whose leap status is carried by this year's leap position.
    year -= 1
    _check_year(year)
    k += 179
    if info.leap_position == 1:
        k += 1
    return year, 7 + trunc_div(k, 30), trunc_mod(k, 30) + 1
