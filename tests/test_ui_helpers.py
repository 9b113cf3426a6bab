import logging

import pytest

from roozh.core.logging_setup import LOG_LEVEL_ENV, resolve_level
from roozh.data.locales import RoozhLocale
from roozh.ui.fonts import (
    GENERIC_UI_FALLBACK,
    format_qss_font_stack,
    resolve_ui_font_stack,
)
from roozh.ui.theme import PALETTES, get_stylesheet

INSTALLED = ["Inter", "Vazirmatn", "Noto Kufi Arabic", "DejaVu Sans"]


@pytest.mark.parametrize(
    "locale, expected",
    [
        (RoozhLocale.PERSIAN, ["Vazirmatn", "DejaVu Sans"]),
        ("ckb", ["Vazirmatn", "Noto Kufi Arabic", "DejaVu Sans"]),
        (RoozhLocale.ENGLISH, ["Inter", "DejaVu Sans"]),
    ],
)
def test_font_stack_follows_locale(locale, expected):
    assert resolve_ui_font_stack(INSTALLED, locale) == expected


def test_font_stack_without_suitable_fonts():
    assert resolve_ui_font_stack(["Comic Sans MS"]) == [GENERIC_UI_FALLBACK]


def test_qss_font_stack_dedupes_and_adds_generic():
    assert format_qss_font_stack(["Inter", " Inter ", ""]) == (
        '"Inter", "Sans Serif"'
    )
    assert format_qss_font_stack(None) == '"Sans Serif"'


def test_stylesheet_uses_palette_and_fonts():
    dark = get_stylesheet("dark", ["Vazirmatn"])
    assert PALETTES["dark"]["window"] in dark
    assert '"Vazirmatn", "Sans Serif"' in dark
    assert "$" not in dark
    assert get_stylesheet("sepia") == get_stylesheet("light")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("40", logging.ERROR),
        (logging.CRITICAL, logging.CRITICAL),
        ("chatty", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_resolve_level_reads_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert resolve_level() == logging.ERROR
