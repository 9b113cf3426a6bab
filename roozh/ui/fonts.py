from __future__ import annotations

from collections.abc import Iterable, Sequence

from roozh.data.locales import RoozhLocale

# Families with full coverage of Persian letters.
PERSIAN_FONTS: tuple[str, ...] = (
    "Vazirmatn",
    "IRANSansX",
    "Sahel",
    "Noto Sans Arabic UI",
    "Noto Naskh Arabic",
)
# Pashto (ځ ښ ږ ډ) and Sorani (ڕ ڵ ۆ ێ) need the extended Arabic block.
EXTENDED_ARABIC_FONTS: tuple[str, ...] = (
    "Vazirmatn",
    "Noto Sans Arabic UI",
    "Noto Naskh Arabic",
    "Noto Kufi Arabic",
)
LATIN_FONTS: tuple[str, ...] = (
    "Inter",
    "Segoe UI",
    "Noto Sans",
)
SHARED_FALLBACK = "DejaVu Sans"
GENERIC_UI_FALLBACK = "Sans Serif"

FONT_PRIORITY: dict[RoozhLocale, tuple[str, ...]] = {
    RoozhLocale.PERSIAN: PERSIAN_FONTS,
    RoozhLocale.DARI: PERSIAN_FONTS,
    RoozhLocale.PASHTO: EXTENDED_ARABIC_FONTS,
    RoozhLocale.KURDISH: EXTENDED_ARABIC_FONTS,
    RoozhLocale.ENGLISH: LATIN_FONTS,
}


def resolve_ui_font_stack(
    installed_families: Iterable[str],
    locale: RoozhLocale | str = RoozhLocale.PERSIAN,
    *,
    limit: int = 3,
) -> list[str]:
    """Pick up to ``limit`` installed families suited to ``locale``.

    ``DejaVu Sans`` is appended when installed since it covers both
    scripts; with nothing suitable installed the generic family is used.
    """
    installed = {str(name).strip() for name in installed_families}
    priority = FONT_PRIORITY[RoozhLocale.from_code(locale)]
    selected = [family for family in priority if family in installed]
    selected = selected[:limit]
    if SHARED_FALLBACK in installed:
        selected.append(SHARED_FALLBACK)
    return selected or [GENERIC_UI_FALLBACK]


def format_qss_font_stack(families: Sequence[str] | None) -> str:
    names: list[str] = []
    for family in families or ():
        name = str(family).strip()
        if name and name not in names:
            names.append(name)
    if GENERIC_UI_FALLBACK not in names:
        names.append(GENERIC_UI_FALLBACK)
    return ", ".join(f'"{name}"' for name in names)
