from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from roozh.core.config import AppConfig
from roozh.data.locales import RoozhLocale
from roozh.models.errors import RoozhError
from roozh.services.calendar_converter import CalendarConverter
from roozh.services.formatter import NEW_LINE, display_text
from roozh.ui.fonts import resolve_ui_font_stack
from roozh.ui.theme import get_stylesheet
from roozh.ui.widgets.toast import ToastManager

LOCALE_LABELS: dict[RoozhLocale, str] = {
    RoozhLocale.PERSIAN: "فارسی",
    RoozhLocale.DARI: "دری",
    RoozhLocale.PASHTO: "پښتو",
    RoozhLocale.KURDISH: "کوردی",
    RoozhLocale.ENGLISH: "English",
}


class MainWindow(QMainWindow):
    def __init__(
        self,
        config: AppConfig,
        converter: CalendarConverter | None = None,
        installed_fonts: list[str] | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.converter = converter or CalendarConverter(config.to_settings())
        self.locale = config.resolved_locale()
        self._installed_fonts = list(installed_fonts or [])
        self._logger = logging.getLogger(self.__class__.__name__)
        self.setWindowTitle("Roozh")
        self.resize(560, 320)

        self.toast = ToastManager(self)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)

        top_row = QHBoxLayout()
        title = QLabel(self.tr("تقویم خورشیدی"))
        title.setObjectName("AppTitle")
        top_row.addWidget(title)
        top_row.addStretch(1)

        self.locale_combo = QComboBox()
        for locale, label in LOCALE_LABELS.items():
            self.locale_combo.addItem(label, locale.value)
        self.locale_combo.setCurrentIndex(
            self.locale_combo.findData(self.locale.value)
        )
        self.locale_combo.currentIndexChanged.connect(self._on_locale_changed)
        top_row.addWidget(self.locale_combo)
        layout.addLayout(top_row)

        self.gregorian_label = QLabel()
        self.gregorian_label.setObjectName("Subtitle")
        layout.addWidget(self.gregorian_label)

        self.output_label = QLabel()
        self.output_label.setObjectName("OutputText")
        self.output_label.setAlignment(Qt.AlignCenter)
        self.output_label.setTextInteractionFlags(
            Qt.TextSelectableByMouse
        )
        layout.addWidget(self.output_label, 1)

        self.update_button = QPushButton(self.tr("به‌روزرسانی"))
        self.update_button.clicked.connect(self.refresh)
        layout.addWidget(self.update_button)

        self.setCentralWidget(container)
        self._apply_locale(self.locale)
        self.refresh()

    def refresh(self) -> None:
        try:
            value = self.converter.gregorian_to_jalali()
            text = display_text(
                value, self.locale, self.config.show_milliseconds
            )
            moment = self.converter.to_datetime(value)
        except RoozhError as exc:
            # Keep the previous text on failure.
            self._logger.exception("Failed to render current date.")
            self.toast.error(str(exc))
            return
        self.output_label.setText(text.replace(NEW_LINE, "\n"))
        self.gregorian_label.setText(moment.strftime("%Y-%m-%d %Z"))

    def current_text(self) -> str:
        return self.output_label.text()

    def _on_locale_changed(self, index: int) -> None:
        code = self.locale_combo.itemData(index)
        try:
            locale = RoozhLocale.from_code(code)
        except RoozhError:
            self._logger.warning("Ignoring unknown locale %r.", code)
            return
        self._apply_locale(locale)
        self.config = AppConfig.save_partial(locale=locale.value)
        self._logger.info("Locale switched to %s.", locale.value)
        self.refresh()

    def _apply_locale(self, locale: RoozhLocale) -> None:
        self.locale = locale
        direction = Qt.RightToLeft if locale.is_rtl else Qt.LeftToRight
        self.setLayoutDirection(direction)
        self.toast.rtl = locale.is_rtl
        self._apply_theme()

    def _apply_theme(self) -> None:
        app = QApplication.instance()
        if app is None:
            return
        app.setStyleSheet(
            get_stylesheet(
                self.config.theme,
                resolve_ui_font_stack(self._installed_fonts, self.locale),
            )
        )
