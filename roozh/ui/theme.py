from __future__ import annotations

from collections.abc import Sequence
from string import Template

from roozh.ui.fonts import format_qss_font_stack

PALETTES: dict[str, dict[str, str]] = {
    "light": {
        "window": "#F5F7FA",
        "text": "#111827",
        "surface": "#FFFFFF",
        "border": "#E5E7EB",
        "accent": "#2563EB",
        "accent_hover": "#1D4ED8",
        "muted": "#6B7280",
        "toast": "rgba(17, 24, 39, 0.92)",
        "error": "#DC2626",
    },
    "dark": {
        "window": "#0F172A",
        "text": "#E5E7EB",
        "surface": "#111827",
        "border": "#1F2937",
        "accent": "#3B82F6",
        "accent_hover": "#2563EB",
        "muted": "#9CA3AF",
        "toast": "rgba(15, 23, 42, 0.95)",
        "error": "#DC2626",
    },
}
DEFAULT_THEME = "light"

# $font_stack and the palette keys are substituted per theme.
STYLESHEET = Template(
    """
* {
    font-family: $font_stack;
    font-size: 14px;
}
QMainWindow, QWidget {
    background: $window;
    color: $text;
}
QLabel#AppTitle {
    font-size: 20px;
    font-weight: 600;
}
QLabel#Subtitle {
    color: $muted;
}
QLabel#OutputText {
    background: $surface;
    border: 1px solid $border;
    border-radius: 12px;
    padding: 18px;
    font-size: 24px;
}
QPushButton {
    background: $accent;
    color: #FFFFFF;
    border-radius: 10px;
    padding: 8px 14px;
}
QPushButton:hover {
    background: $accent_hover;
}
QComboBox {
    background: $surface;
    border: 1px solid $border;
    border-radius: 8px;
    padding: 4px 10px;
}
QFrame#Toast {
    background: $toast;
    border-radius: 12px;
}
QFrame#Toast QLabel {
    background: transparent;
    color: #FFFFFF;
}
QFrame#Toast[toastType="error"] {
    background: $error;
}
"""
)


def get_stylesheet(
    theme: str, font_families: Sequence[str] | None = None
) -> str:
    palette = PALETTES.get(theme, PALETTES[DEFAULT_THEME])
    return STYLESHEET.substitute(
        palette, font_stack=format_qss_font_stack(font_families)
    )
