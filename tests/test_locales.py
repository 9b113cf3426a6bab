import pytest

from roozh.data.locales import (
    LOCALE_TABLES,
    LocaleNames,
    RoozhLocale,
    get_locale_names,
)
from roozh.models.calendar_date import Meridiem, Weekday
from roozh.models.errors import InvalidArgumentError, LocaleConfigurationError


def test_every_locale_has_complete_tables():
    assert set(LOCALE_TABLES) == set(RoozhLocale)
    for names in LOCALE_TABLES.values():
        assert len(names.months) == 12
        assert len(names.short_months) == 12
        assert len(names.weekdays) == 7
        assert len(names.meridiem) == 2


@pytest.mark.parametrize(
    "code, expected",
    [
        ("fa", RoozhLocale.PERSIAN),
        ("PRS", RoozhLocale.DARI),
        (" ps ", RoozhLocale.PASHTO),
        ("kurdish", RoozhLocale.KURDISH),
        ("en", RoozhLocale.ENGLISH),
        (RoozhLocale.ENGLISH, RoozhLocale.ENGLISH),
    ],
)
def test_from_code(code, expected):
    assert RoozhLocale.from_code(code) is expected


@pytest.mark.parametrize("code", [None, "", "de", "farsi"])
def test_unknown_locale(code):
    with pytest.raises(LocaleConfigurationError):
        RoozhLocale.from_code(code)


def test_only_english_is_left_to_right():
    assert not RoozhLocale.ENGLISH.is_rtl
    assert all(
        locale.is_rtl
        for locale in RoozhLocale
        if locale is not RoozhLocale.ENGLISH
    )


def test_name_lookups():
    names = get_locale_names("fa")
    assert names.month_name(1) == "فروردین"
    assert names.short_month_name(12) == "اسف"
    assert names.weekday_name(Weekday.SATURDAY) == "شنبه"
    assert names.meridiem_text(Meridiem.PM) == "ب.ظ"
    english = get_locale_names(RoozhLocale.ENGLISH)
    assert english.weekday_name(6) == "Friday"
    assert english.month_name(7) == "Mehr"


def test_name_lookups_reject_bad_indexes():
    names = get_locale_names(RoozhLocale.ENGLISH)
    with pytest.raises(InvalidArgumentError):
        names.month_name(0)
    with pytest.raises(InvalidArgumentError):
        names.short_month_name(13)
    with pytest.raises(InvalidArgumentError):
        names.weekday_name(7)


def test_incomplete_table_is_rejected():
    english = get_locale_names(RoozhLocale.ENGLISH)
    with pytest.raises(LocaleConfigurationError):
        LocaleNames(
            months=english.months[:11],
            short_months=english.short_months,
            weekdays=english.weekdays,
            meridiem=english.meridiem,
        )
    with pytest.raises(LocaleConfigurationError):
        LocaleNames(
            months=english.months,
            short_months=english.short_months,
            weekdays=english.weekdays,
            meridiem=("am", ""),
        )


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        LOCALE_TABLES[RoozhLocale.ENGLISH] = None
