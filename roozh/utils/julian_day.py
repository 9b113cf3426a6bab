"""Julian Day Number arithmetic for the Gregorian and Julian calendars.

The formulas follow D.A. Hatcher, Q.Jl.R.Astron.Soc. 25 (1984), 53-55, as
modified by K.M. Borkowski, Post.Astron. 25 (1987), 275-279. A Julian Day
Number here is an integer and corresponds to noon (12h UT) of the date.
The procedures hold from 1 March -100100 of both calendars up to a few
million years ahead.
"""

from __future__ import annotations


def trunc_div(a: int, b: int) -> int:
    # Integer quotient truncated toward zero.
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    return a - trunc_div(a, b) * b


def gregorian_to_jdn(
    year: int, month: int, day: int, *, julian: bool = False
) -> int:
    """Return the Julian Day Number of a calendar date.

    The base expression counts days in the Julian calendar; the Gregorian
    calendar is reached by adding the century correction term.
    """
    jdn = (
        trunc_div((year + trunc_div(month - 8, 6) + 100100) * 1461, 4)
        + trunc_div(153 * trunc_mod(month + 9, 12) + 2, 5)
        + day
        - 34840408
    )
    if not julian:
        century = trunc_div(year + 100100 + trunc_div(month - 8, 6), 100)
        jdn = jdn - trunc_div(century * 3, 4) + 752
    return jdn


def jdn_to_gregorian(
    jdn: int, *, julian: bool = False
) -> tuple[int, int, int]:
    """Inverse of :func:`gregorian_to_jdn`."""
    j = 4 * jdn + 139361631
    if not julian:
        cycles = trunc_div(4 * jdn + 183187720, 146097)
        j = j + trunc_div(cycles * 3, 4) * 4 - 3908
    i = trunc_div(trunc_mod(j, 1461), 4) * 5 + 308
    day = trunc_div(trunc_mod(i, 153), 5) + 1
    month = trunc_mod(trunc_div(i, 153), 12) + 1
    year = trunc_div(j, 1461) - 100100 + trunc_div(8 - month, 6)
    return year, month, day


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_gregorian_leap(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def day_of_week(jdn: int) -> int:
    # 0 = Saturday ... 6 = Friday
    return (jdn + 2) % 7
