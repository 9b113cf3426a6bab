from datetime import datetime

import pytest

from roozh.data.locales import RoozhLocale
from roozh.models.calendar_date import CalendarDate, CalendarSystem, Weekday
from roozh.models.errors import InvalidArgumentError, InvalidStateError
from roozh.services.formatter import (
    MAX_WIDTH,
    MIN_WIDTH,
    NEW_LINE,
    FieldComponent,
    FieldKind,
    Literal,
    RoozhFormatter,
    display_text,
)


@pytest.mark.parametrize(
    "year, expected",
    [(1403, "03"), (1399, "99"), (1400, "00"), (5, "5"), (-61, "61")],
)
def test_short_year_keeps_last_two_digits(jalali_date, year, expected):
    formatter = RoozhFormatter(jalali_date(year=year)).append_year(
        short_year=True
    )
    assert formatter.build() == expected


def test_full_year(jalali_date):
    assert RoozhFormatter(jalali_date()).append_year().build() == "1403"


def test_day_of_month_padding(jalali_date):
    value = jalali_date(day=5)
    assert RoozhFormatter(value).append_day_of_month().build() == "5"
    assert (
        RoozhFormatter(value).append_day_of_month(leading_zero=True).build()
        == "05"
    )
    assert (
        RoozhFormatter(jalali_date(day=25))
        .append_day_of_month(leading_zero=True)
        .build()
        == "25"
    )


def test_month_forms(jalali_date):
    value = jalali_date(month=2, day=10)
    fa = RoozhFormatter(value)
    assert fa.append_month().build() == "2"
    assert fa.clear().append_month_leading_zero().build() == "02"
    assert fa.clear().append_month_short_name().build() == "ارد"
    assert fa.clear().append_month_name().build() == "اردیبهشت"
    en = RoozhFormatter(value, RoozhLocale.ENGLISH).append_month_name()
    assert en.build() == "Ordibehesht"


@pytest.mark.parametrize(
    "locale, expected",
    [
        (RoozhLocale.PERSIAN, "اسفند"),
        (RoozhLocale.DARI, "حوت"),
        (RoozhLocale.PASHTO, "کب"),
        (RoozhLocale.KURDISH, "ڕەشەمە"),
        (RoozhLocale.ENGLISH, "Esfand"),
    ],
)
def test_esfand_in_every_locale(jalali_date, locale, expected):
    value = jalali_date(month=12, day=1)
    assert RoozhFormatter(value, locale).append_month_name().build() == (
        expected
    )


def test_locale_accepts_code_string(jalali_date):
    formatter = RoozhFormatter(jalali_date(), "en")
    assert formatter.locale is RoozhLocale.ENGLISH


@pytest.mark.parametrize(
    "width, expected", [(-3, MIN_WIDTH), (0, MIN_WIDTH), (9, MAX_WIDTH)]
)
def test_width_is_clamped(width, expected):
    assert FieldComponent(FieldKind.MONTH, width).width == expected


def test_clamped_width_renders(jalali_date):
    formatter = RoozhFormatter(jalali_date(), RoozhLocale.ENGLISH)
    formatter.append_field(FieldKind.MONTH, 12)
    assert formatter.build() == "Farvardin"


def test_unknown_field_kind(jalali_date):
    with pytest.raises(InvalidArgumentError):
        RoozhFormatter(jalali_date()).append_field("fortnight")


def test_empty_build_is_rejected(jalali_date):
    with pytest.raises(InvalidStateError):
        RoozhFormatter(jalali_date()).build()


def test_text_arguments_are_validated(jalali_date):
    formatter = RoozhFormatter(jalali_date())
    with pytest.raises(InvalidArgumentError):
        formatter.append_text(None)
    with pytest.raises(InvalidArgumentError):
        formatter.append_text(42)
    with pytest.raises(InvalidArgumentError):
        formatter.append_character("ab")
    with pytest.raises(InvalidArgumentError):
        formatter.append_character("")
    assert formatter.elements == ()


def test_elements_render_in_append_order(jalali_date):
    value = jalali_date(year=1403, month=7, day=9)
    formatter = (
        RoozhFormatter(value)
        .append_year()
        .append_slash()
        .append_month_leading_zero()
        .append_slash()
        .append_day_of_month(leading_zero=True)
        .append_text(" | ")
        .append_hyphen()
        .append_dot()
    )
    assert formatter.build() == "1403/07/09 | -."
    assert formatter.elements[1] == Literal("/")
    assert formatter.elements[0] == FieldComponent(FieldKind.YEAR, 4)


def test_build_is_repeatable_and_snapshot_is_immutable(jalali_date):
    formatter = RoozhFormatter(jalali_date()).append_year()
    snapshot = formatter.elements
    assert formatter.build() == formatter.build() == "1403"
    formatter.append_space()
    assert len(snapshot) == 1
    assert len(formatter.elements) == 2


def test_clear_empties_elements(jalali_date):
    formatter = RoozhFormatter(jalali_date()).append_year().append_space()
    formatter.clear()
    assert formatter.elements == ()
    assert formatter.append_month().build() == "1"


def test_clock_fields(jalali_date):
    value = jalali_date(hour_of_day=13, minute=4, second=9, millisecond=7)
    formatter = (
        RoozhFormatter(value, RoozhLocale.ENGLISH)
        .append_hour()
        .append_colon()
        .append_minute(leading_zero=True)
        .append_colon()
        .append_second()
        .append_dot()
        .append_millisecond()
        .append_space()
        .append_am_pm()
        .append_space()
        .append_hour_of_day(leading_zero=True)
    )
    assert formatter.build() == "1:04:9.7 p.m. 13"


@pytest.mark.parametrize(
    "locale, am, pm",
    [
        (RoozhLocale.PERSIAN, "ق.ظ", "ب.ظ"),
        (RoozhLocale.PASHTO, "غ.م", "غ.و"),
        (RoozhLocale.ENGLISH, "a.m.", "p.m."),
    ],
)
def test_meridiem_text(jalali_date, locale, am, pm):
    morning = RoozhFormatter(jalali_date(hour_of_day=11), locale)
    evening = RoozhFormatter(jalali_date(hour_of_day=12), locale)
    assert morning.append_am_pm().build() == am
    assert evening.append_am_pm().build() == pm


def test_day_of_week_forms(jalali_date):
    value = jalali_date(weekday=Weekday.WEDNESDAY, day_of_week=4)
    en = RoozhFormatter(value, RoozhLocale.ENGLISH)
    assert en.append_day_of_week().build() == "5"
    assert en.clear().append_day_of_week_leading_zero().build() == "05"
    assert en.clear().append_day_of_week_text().build() == "Wednesday"
    fa = RoozhFormatter(value).append_day_of_week_text()
    assert fa.build() == "چهارشنبه"


def test_month_names_need_a_jalali_date():
    value = CalendarDate(CalendarSystem.GREGORIAN, 2024, 3, 20)
    assert RoozhFormatter(value).append_month().build() == "3"
    with pytest.raises(InvalidArgumentError):
        RoozhFormatter(value).append_month_name().build()


def test_display_text_english_nowruz(converter):
    value = converter.gregorian_to_jalali(datetime(2024, 3, 20, 12, 0))
    assert display_text(value, RoozhLocale.ENGLISH) == (
        "1 Farvardin 1403" + NEW_LINE + "00:00:00.0 p.m."
    )


def test_display_text_without_milliseconds(jalali_date):
    value = jalali_date(hour_of_day=9, minute=30, millisecond=450)
    text = display_text(value, "fa", show_milliseconds=False)
    assert text == "1 فروردین 1403\r\n09:30:00 ق.ظ"
