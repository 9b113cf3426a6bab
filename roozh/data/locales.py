from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from roozh.models.calendar_date import Meridiem, Weekday
from roozh.models.errors import InvalidArgumentError, LocaleConfigurationError


class RoozhLocale(str, Enum):
    PERSIAN = "fa"
    DARI = "prs"
    PASHTO = "ps"
    KURDISH = "ckb"
    ENGLISH = "en"

    @property
    def is_rtl(self) -> bool:
        return self is not RoozhLocale.ENGLISH

    @classmethod
    def from_code(cls, code: str | None) -> "RoozhLocale":
        if isinstance(code, cls):
            return code
        key = str(code or "").strip().lower()
        for locale in cls:
            if key in (locale.value, locale.name.lower()):
                return locale
        raise LocaleConfigurationError(f"Unknown locale: {code!r}")


@dataclass(frozen=True)
class LocaleNames:
    months: tuple[str, ...]
    short_months: tuple[str, ...]
    weekdays: tuple[str, ...]
    meridiem: tuple[str, ...]

    _EXPECTED = (
        ("months", 12),
        ("short_months", 12),
        ("weekdays", 7),
        ("meridiem", 2),
    )

    def __post_init__(self) -> None:
        for field_name, count in self._EXPECTED:
            values = tuple(getattr(self, field_name))
            if len(values) != count:
                raise LocaleConfigurationError(
                    f"{field_name} needs {count} entries, got {len(values)}"
                )
            if any(not isinstance(v, str) or not v for v in values):
                raise LocaleConfigurationError(
                    f"{field_name} contains an empty entry"
                )
            object.__setattr__(self, field_name, values)

    def month_name(self, month: int) -> str:
        return self.months[self._month_index(month)]

    def short_month_name(self, month: int) -> str:
        return self.short_months[self._month_index(month)]

    def weekday_name(self, weekday: Weekday | int) -> str:
        index = int(weekday)
        if not 0 <= index <= 6:
            raise InvalidArgumentError(f"Weekday index out of range: {index}")
        return self.weekdays[index]

    def meridiem_text(self, meridiem: Meridiem | int) -> str:
        return self.meridiem[int(Meridiem(meridiem))]

    @staticmethod
    def _month_index(month: int) -> int:
        if not 1 <= month <= 12:
            raise InvalidArgumentError(
                f"Month must be between 1 and 12: {month}"
            )
        return month - 1


_PERSIAN_MONTHS = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)
_PERSIAN_SHORT_MONTHS = (
    "فرو",
    "ارد",
    "خرد",
    "تیر",
    "مرد",
    "شهر",
    "مهر",
    "آبا",
    "آذر",
    "دی",
    "بهم",
    "اسف",
)
_PERSIAN_WEEKDAYS = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)
_DARI_MONTHS = (
    "حمل",
    "ثور",
    "جوزا",
    "سرطان",
    "اسد",
    "سنبله",
    "میزان",
    "عقرب",
    "قوس",
    "جدی",
    "دلو",
    "حوت",
)
_PASHTO_MONTHS = (
    "وری",
    "غويی",
    "غبرګولی",
    "چنګاښ",
    "زمری",
    "وږی",
    "تله",
    "لړم",
    "ليندۍ",
    "مرغومی",
    "سلواغه",
    "کب",
)
_PASHTO_WEEKDAYS = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)
_KURDISH_MONTHS = (
    "خاکەلێوە",
    "گوڵان",
    "جۆزەردان",
    "پووشپەڕ",
    "گەلاوێژ",
    "خەرمانان",
    "ڕەزبەر",
    "خەزەڵوەر",
    "سەرماوەز",
    "بەفرانبار",
    "ڕێبەندان",
    "ڕەشەمە",
)
_KURDISH_WEEKDAYS = (
    "شەممە",
    "یەکشەممە",
    "دووشەممە",
    "سێشەممە",
    "چوارشەممە",
    "پێنجشەممە",
    "هەینی",
)
_ENGLISH_MONTHS = (
    "Farvardin",
    "Ordibehesht",
    "Khordad",
    "Tir",
    "Mordad",
    "Shahrivar",
    "Mehr",
    "Aban",
    "Azar",
    "Dey",
    "Bahman",
    "Esfand",
)
_ENGLISH_WEEKDAYS = (
    "Saturday",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
)

LOCALE_TABLES: Mapping[RoozhLocale, LocaleNames] = MappingProxyType(
    {
        RoozhLocale.PERSIAN: LocaleNames(
            months=_PERSIAN_MONTHS,
            short_months=_PERSIAN_SHORT_MONTHS,
            weekdays=_PERSIAN_WEEKDAYS,
            meridiem=("ق.ظ", "ب.ظ"),
        ),
        RoozhLocale.DARI: LocaleNames(
            months=_DARI_MONTHS,
            short_months=_DARI_MONTHS,
            weekdays=_PERSIAN_WEEKDAYS,
            meridiem=("ق.ظ", "ب.ظ"),
        ),
        RoozhLocale.PASHTO: LocaleNames(
            months=_PASHTO_MONTHS,
            short_months=_PASHTO_MONTHS,
            weekdays=_PASHTO_WEEKDAYS,
            meridiem=("غ.م", "غ.و"),
        ),
        RoozhLocale.KURDISH: LocaleNames(
            months=_KURDISH_MONTHS,
            short_months=_KURDISH_MONTHS,
            weekdays=_KURDISH_WEEKDAYS,
            meridiem=("پ.ن", "د.ن"),
        ),
        RoozhLocale.ENGLISH: LocaleNames(
            months=_ENGLISH_MONTHS,
            short_months=_ENGLISH_MONTHS,
            weekdays=_ENGLISH_WEEKDAYS,
            meridiem=("a.m.", "p.m."),
        ),
    }
)


def get_locale_names(locale: RoozhLocale | str) -> LocaleNames:
    resolved = RoozhLocale.from_code(locale)
    try:
        return LOCALE_TABLES[resolved]
    except KeyError as exc:
        raise LocaleConfigurationError(
            f"No name table for locale {resolved.value}"
        ) from exc
