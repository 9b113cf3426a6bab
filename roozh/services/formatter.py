from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from roozh.data.locales import LocaleNames, RoozhLocale, get_locale_names
from roozh.models.calendar_date import CalendarDate
from roozh.models.errors import InvalidArgumentError, InvalidStateError

MIN_WIDTH = 1
MAX_WIDTH = 4
NEW_LINE = "\r\n"

_SHORT_YEAR = re.compile(r"\d{2}$")


class FieldKind(str, Enum):
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    YEAR = "year"
    HOUR = "hour"
    HOUR_OF_DAY = "hour_of_day"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MERIDIEM = "meridiem"
    DAY_OF_WEEK = "day_of_week"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class FieldComponent:
    kind: FieldKind
    width: int = MIN_WIDTH

    def __post_init__(self) -> None:
        width = min(max(int(self.width), MIN_WIDTH), MAX_WIDTH)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "kind", FieldKind(self.kind))


FormatElement = Union[Literal, FieldComponent]


def _number(value: int, width: int) -> str:
    if width == 2:
        return f"{value:02d}"
    return str(value)


def _short_year(year: int) -> str:
    text = str(year)
    match = _SHORT_YEAR.search(text)
    return match.group(0) if match else text


def _month(value: CalendarDate, width: int, names: LocaleNames) -> str:
    if width <= 2:
        return _number(value.month, width)
    if not value.is_jalali:
        raise InvalidArgumentError(
            "Month names are only available for Jalali dates."
        )
    if width == 3:
        return names.short_month_name(value.month)
    return names.month_name(value.month)


def _year(value: CalendarDate, width: int, names: LocaleNames) -> str:
    if width <= 2:
        return _short_year(value.year)
    return str(value.year)


def _day_of_week(value: CalendarDate, width: int, names: LocaleNames) -> str:
    if width >= 3:
        return names.weekday_name(value.weekday)
    return _number(value.day_of_week + 1, width)


def _meridiem(value: CalendarDate, width: int, names: LocaleNames) -> str:
    return names.meridiem_text(value.meridiem)


_RENDERERS = {
    FieldKind.DAY_OF_MONTH: lambda v, w, n: _number(v.day_of_month, w),
    FieldKind.MONTH: _month,
    FieldKind.YEAR: _year,
    FieldKind.HOUR: lambda v, w, n: _number(v.hour, w),
    FieldKind.HOUR_OF_DAY: lambda v, w, n: _number(v.hour_of_day, w),
    FieldKind.MINUTE: lambda v, w, n: _number(v.minute, w),
    FieldKind.SECOND: lambda v, w, n: _number(v.second, w),
    FieldKind.MILLISECOND: lambda v, w, n: _number(v.millisecond, w),
    FieldKind.MERIDIEM: _meridiem,
    FieldKind.DAY_OF_WEEK: _day_of_week,
}


def render_field(
    component: FieldComponent, value: CalendarDate, names: LocaleNames
) -> str:
    return _RENDERERS[component.kind](value, component.width, names)


def render(
    elements: Sequence[FormatElement],
    value: CalendarDate,
    names: LocaleNames,
) -> str:
    """Render ``elements`` in order against ``value``.

    Literals are copied verbatim; field components are resolved from the
    date and, for names, from the locale table.
    """
    if not elements:
        raise InvalidStateError("nothing to render")
    parts: list[str] = []
    for element in elements:
        if isinstance(element, Literal):
            parts.append(element.text)
        elif isinstance(element, FieldComponent):
            parts.append(render_field(element, value, names))
        else:
            raise InvalidArgumentError(
                f"Unsupported format element: {element!r}"
            )
    return "".join(parts)


class RoozhFormatter:
    """Append-based builder for localized date text.

    An instance belongs to a single caller; the element list is not
    synchronized.
    """

    def __init__(
        self,
        value: CalendarDate,
        locale: RoozhLocale | str = RoozhLocale.PERSIAN,
    ) -> None:
        self.value = value
        self.locale = RoozhLocale.from_code(locale)
        self.names = get_locale_names(self.locale)
        self._elements: list[FormatElement] = []
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def elements(self) -> tuple[FormatElement, ...]:
        return tuple(self._elements)

    def clear(self) -> "RoozhFormatter":
        self._elements.clear()
        return self

    def build(self) -> str:
        elements = self.elements
        if not elements:
            self._logger.warning("Build requested with no elements.")
        return render(elements, self.value, self.names)

    def append_text(self, text: str) -> "RoozhFormatter":
        if text is None:
            raise InvalidArgumentError("Argument cannot be null.")
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Text must be a string, got {type(text).__name__}"
            )
        self._elements.append(Literal(text))
        return self

    def append_character(self, char: str) -> "RoozhFormatter":
        if char is None:
            raise InvalidArgumentError("Argument cannot be null.")
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidArgumentError(
                f"Expected a single character, got {char!r}"
            )
        self._elements.append(Literal(char))
        return self

    def append_space(self) -> "RoozhFormatter":
        return self.append_character(" ")

    def append_new_line(self) -> "RoozhFormatter":
        return self.append_text(NEW_LINE)

    def append_slash(self) -> "RoozhFormatter":
        return self.append_character("/")

    def append_dot(self) -> "RoozhFormatter":
        return self.append_character(".")

    def append_hyphen(self) -> "RoozhFormatter":
        return self.append_character("-")

    def append_colon(self) -> "RoozhFormatter":
        return self.append_character(":")

    def append_field(
        self, kind: FieldKind | str, width: int = MIN_WIDTH
    ) -> "RoozhFormatter":
        try:
            component = FieldComponent(FieldKind(kind), width)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Invalid field component: {kind!r}, {width!r}"
            ) from exc
        self._elements.append(component)
        return self

    def append_day_of_month(
        self, leading_zero: bool = False
    ) -> "RoozhFormatter":
        return self.append_field(
            FieldKind.DAY_OF_MONTH, 2 if leading_zero else 1
        )

    def append_hour(self, leading_zero: bool = False) -> "RoozhFormatter":
        return self.append_field(FieldKind.HOUR, 2 if leading_zero else 1)

    def append_hour_of_day(
        self, leading_zero: bool = False
    ) -> "RoozhFormatter":
        return self.append_field(
            FieldKind.HOUR_OF_DAY, 2 if leading_zero else 1
        )

    def append_minute(self, leading_zero: bool = False) -> "RoozhFormatter":
        return self.append_field(FieldKind.MINUTE, 2 if leading_zero else 1)

    def append_second(self, leading_zero: bool = False) -> "RoozhFormatter":
        return self.append_field(FieldKind.SECOND, 2 if leading_zero else 1)

    def append_millisecond(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.MILLISECOND)

    def append_am_pm(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.MERIDIEM)

    def append_month(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.MONTH, 1)

    def append_month_leading_zero(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.MONTH, 2)

    def append_month_short_name(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.MONTH, 3)

    def append_month_name(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.MONTH, 4)

    def append_day_of_week(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.DAY_OF_WEEK, 1)

    def append_day_of_week_leading_zero(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.DAY_OF_WEEK, 2)

    def append_day_of_week_text(self) -> "RoozhFormatter":
        return self.append_field(FieldKind.DAY_OF_WEEK, 3)

    def append_year(self, short_year: bool = False) -> "RoozhFormatter":
        return self.append_field(FieldKind.YEAR, 2 if short_year else 4)


def display_text(
    value: CalendarDate,
    locale: RoozhLocale | str = RoozhLocale.PERSIAN,
    show_milliseconds: bool = True,
) -> str:
    formatter = (
        RoozhFormatter(value, locale)
        .append_day_of_month()
        .append_space()
        .append_month_name()
        .append_space()
        .append_year()
        .append_new_line()
        .append_hour(leading_zero=True)
        .append_colon()
        .append_minute(leading_zero=True)
        .append_colon()
        .append_second(leading_zero=True)
    )
    if show_milliseconds:
        formatter.append_dot().append_millisecond()
    return formatter.append_space().append_am_pm().build()
