from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from roozh.models.errors import InvalidArgumentError
from roozh.utils.intercalation import jalali_to_jdn
from roozh.utils.intercalation import month_length as jalali_month_length
from roozh.utils.julian_day import (
    day_of_week,
    gregorian_month_length,
    gregorian_to_jdn,
)


class CalendarSystem(str, Enum):
    GREGORIAN = "gregorian"
    JALALI = "jalali"


class Weekday(IntEnum):
    SATURDAY = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        try:
            return cls[str(name).strip().upper()]
        except KeyError as exc:
            raise InvalidArgumentError(f"Unknown weekday: {name!r}") from exc


class Meridiem(IntEnum):
    AM = 0
    PM = 1


def month_length(calendar: CalendarSystem, year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"Month must be between 1 and 12: {month}")
    if calendar is CalendarSystem.JALALI:
        return jalali_month_length(year, month)
    return gregorian_month_length(year, month)


@dataclass(frozen=True)
class CalendarDate:
    calendar: CalendarSystem
    year: int
    month: int
    day: int
    hour_of_day: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    # Derived from the date when omitted; day_of_week then counts from
    # Saturday.
    jdn: int | None = None
    weekday: Weekday | None = None
    day_of_week: int | None = None
    timezone: str = "Asia/Tehran"

    def __post_init__(self) -> None:
        days = month_length(self.calendar, self.year, self.month)
        if not 1 <= self.day <= days:
            raise InvalidArgumentError(
                f"Day {self.day} is invalid for {self.calendar.value} "
                f"{self.year}/{self.month:02d} ({days} days)"
            )
        self._derive_day_fields()
        for name, value, upper in (
            ("hour_of_day", self.hour_of_day, 23),
            ("minute", self.minute, 59),
            ("second", self.second, 59),
            ("millisecond", self.millisecond, 999),
            ("day_of_week", self.day_of_week, 6),
        ):
            if not 0 <= value <= upper:
                raise InvalidArgumentError(
                    f"{name} must be between 0 and {upper}: {value}"
                )

    def _derive_day_fields(self) -> None:
        if self.is_jalali:
            jdn = jalali_to_jdn(self.year, self.month, self.day)
        else:
            jdn = gregorian_to_jdn(self.year, self.month, self.day)
        if self.jdn is not None and self.jdn != jdn:
            raise InvalidArgumentError(
                f"Day number {self.jdn} does not match "
                f"{self.year}/{self.month:02d}/{self.day:02d} ({jdn})"
            )
        weekday = Weekday(day_of_week(jdn))
        if self.weekday is not None and self.weekday != weekday:
            raise InvalidArgumentError(
                f"{self.year}/{self.month:02d}/{self.day:02d} falls on "
                f"{weekday.name.title()}, not {self.weekday!r}"
            )
        object.__setattr__(self, "jdn", jdn)
        object.__setattr__(self, "weekday", weekday)
        if self.day_of_week is None:
            object.__setattr__(self, "day_of_week", int(weekday))

    @property
    def day_of_month(self) -> int:
        return self.day

    @property
    def hour(self) -> int:
        return self.hour_of_day % 12

    @property
    def meridiem(self) -> Meridiem:
        return Meridiem.AM if self.hour_of_day < 12 else Meridiem.PM

    @property
    def is_jalali(self) -> bool:
        return self.calendar is CalendarSystem.JALALI

    def as_tuple(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day
