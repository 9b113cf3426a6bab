from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from roozh.core.config import DEFAULT_SETTINGS, ConversionSettings
from roozh.models.calendar_date import (
    CalendarDate,
    CalendarSystem,
    Weekday,
    month_length,
)
from roozh.models.errors import InvalidArgumentError, OutOfRangeError
from roozh.utils.intercalation import jalali_to_jdn, jdn_to_jalali
from roozh.utils.julian_day import (
    day_of_week,
    gregorian_to_jdn,
    jdn_to_gregorian,
)


class CalendarConverter:
    """Converts between the Gregorian and Jalali calendars.

    Every call returns a fresh :class:`CalendarDate`; the zone and the first
    day of the week come from the settings passed in, never from the input
    object.
    """

    def __init__(self, settings: ConversionSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.last_result: CalendarDate | None = None
        self._logger = logging.getLogger(self.__class__.__name__)

    def gregorian_to_jalali(
        self, value: datetime | date | int | None = None
    ) -> CalendarDate:
        moment = self._localize(value)
        jdn = gregorian_to_jdn(moment.year, moment.month, moment.day)
        year, month, day = jdn_to_jalali(jdn)
        result = self._build(
            CalendarSystem.JALALI, year, month, day, jdn, moment
        )
        self._logger.debug(
            "Gregorian %s -> Jalali %04d/%02d/%02d",
            moment.date().isoformat(),
            year,
            month,
            day,
        )
        return result

    def jalali_to_gregorian(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> CalendarDate:
        days = month_length(CalendarSystem.JALALI, year, month)
        if not 1 <= day <= days:
            raise InvalidArgumentError(
                f"Invalid Jalali date: {year}/{month}/{day}"
            )
        jdn = jalali_to_jdn(year, month, day)
        gy, gm, gd = jdn_to_gregorian(jdn)
        for name, value, upper in (
            ("hour", hour, 23),
            ("minute", minute, 59),
            ("second", second, 59),
            ("millisecond", millisecond, 999),
        ):
            if not 0 <= value <= upper:
                raise InvalidArgumentError(
                    f"{name} must be between 0 and {upper}: {value}"
                )
        clock = datetime(2000, 1, 1, hour, minute, second, millisecond * 1000)
        result = self._build(CalendarSystem.GREGORIAN, gy, gm, gd, jdn, clock)
        self._logger.debug(
            "Jalali %04d/%02d/%02d -> Gregorian %04d-%02d-%02d",
            year,
            month,
            day,
            gy,
            gm,
            gd,
        )
        return result

    def to_datetime(self, value: CalendarDate) -> datetime:
        if value.is_jalali:
            value = self.jalali_to_gregorian(
                value.year,
                value.month,
                value.day,
                value.hour_of_day,
                value.minute,
                value.second,
                value.millisecond,
            )
        return datetime(
            value.year,
            value.month,
            value.day,
            value.hour_of_day,
            value.minute,
            value.second,
            value.millisecond * 1000,
            tzinfo=self.settings.zone,
        )

    def _build(
        self,
        calendar: CalendarSystem,
        year: int,
        month: int,
        day: int,
        jdn: int,
        clock: datetime,
    ) -> CalendarDate:
        weekday = Weekday(day_of_week(jdn))
        result = CalendarDate(
            calendar=calendar,
            year=year,
            month=month,
            day=day,
            hour_of_day=clock.hour,
            minute=clock.minute,
            second=clock.second,
            millisecond=clock.microsecond // 1000,
            jdn=jdn,
            weekday=weekday,
            day_of_week=(weekday - self.settings.first_day_of_week) % 7,
            timezone=self.settings.timezone,
        )
        self.last_result = result
        return result

    def _localize(self, value: datetime | date | int | None) -> datetime:
        zone = self.settings.zone
        if value is None:
            return datetime.now(zone)
        if isinstance(value, bool):
            raise InvalidArgumentError("Expected a timestamp, got a bool.")
        if isinstance(value, int):
            try:
                moment = datetime.fromtimestamp(value // 1000, tz=zone)
            except (OverflowError, OSError, ValueError) as exc:
                raise OutOfRangeError(
                    f"Timestamp out of range: {value}"
                ) from exc
            return moment + timedelta(milliseconds=value % 1000)
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=zone)
            try:
                return value.astimezone(zone)
            except OverflowError as exc:
                raise OutOfRangeError(
                    f"Datetime out of range in {self.settings.timezone}: "
                    f"{value.isoformat()}"
                ) from exc
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=zone)
        raise InvalidArgumentError(
            f"Unsupported timestamp type: {type(value).__name__}"
        )
