from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from PySide6.QtCore import QLibraryInfo, QLocale, Qt, QTranslator
from PySide6.QtGui import QFontDatabase, QGuiApplication
from PySide6.QtWidgets import QApplication

if __package__ is None:
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from roozh.core.config import AppConfig
from roozh.core.logging_setup import (
    enable_fault_log,
    install_error_hooks,
    setup_logging,
)
from roozh.data.locales import RoozhLocale
from roozh.ui.main_window import MainWindow

QT_LOCALES: dict[RoozhLocale, str] = {
    RoozhLocale.PERSIAN: "fa_IR",
    RoozhLocale.DARI: "fa_AF",
    RoozhLocale.PASHTO: "ps_AF",
    RoozhLocale.KURDISH: "ckb_IQ",
    RoozhLocale.ENGLISH: "en_US",
}


def main() -> int:
    setup_logging()
    install_error_hooks()
    enable_fault_log()
    _configure_high_dpi()
    app = QApplication(sys.argv)
    app.setApplicationName("Roozh")
    app.setStyle("Fusion")

    config = AppConfig.load()
    _install_qt_translations(app, config.resolved_locale())
    app.aboutToQuit.connect(
        lambda: logging.getLogger("AppLifecycle").info("Shutting down")
    )

    window = MainWindow(config, installed_fonts=QFontDatabase.families())
    window.show()
    return app.exec()


def _install_qt_translations(app: QApplication, locale: RoozhLocale) -> None:
    qt_locale = QLocale(QT_LOCALES[locale])
    QLocale.setDefault(qt_locale)
    translator = QTranslator(app)
    if translator.load(
        qt_locale,
        "qtbase",
        "_",
        QLibraryInfo.path(QLibraryInfo.TranslationsPath),
    ):
        app.installTranslator(translator)
    else:
        logging.getLogger("AppLifecycle").debug(
            "No Qt translations for %s", qt_locale.name()
        )
    # QTranslator is not owned by the application on every binding.
    app._translator = translator  # type: ignore[attr-defined]


def _configure_high_dpi() -> None:
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_SCALE_FACTOR_ROUNDING_POLICY", "PassThrough")
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )


if __name__ == "__main__":
    raise SystemExit(main())
