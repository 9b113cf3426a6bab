from __future__ import annotations

from enum import Enum

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget


class ToastKind(str, Enum):
    INFO = "info"
    ERROR = "error"

    @property
    def duration_ms(self) -> int:
        return 5000 if self is ToastKind.ERROR else 2500


class Toast(QFrame):
    """Borderless notice anchored to the bottom of its parent window."""

    def __init__(
        self,
        message: str,
        kind: ToastKind,
        parent: QWidget,
        rtl: bool = True,
    ) -> None:
        super().__init__(parent)
        self.kind = kind
        self.setObjectName("Toast")
        self.setProperty("toastType", kind.value)
        self.setLayoutDirection(Qt.RightToLeft if rtl else Qt.LeftToRight)

        self.label = QLabel(message)
        self.label.setWordWrap(True)
        self.label.setMaximumWidth(max(parent.width() - 96, 160))
        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 10)
        layout.addWidget(self.label)
        self.adjustSize()

    def text(self) -> str:
        return self.label.text()


class ToastManager:
    """Shows one toast at a time; a new message replaces the current one."""

    MARGIN = 24

    def __init__(self, parent: QWidget) -> None:
        self.parent = parent
        self.rtl = True
        self.last_toast: Toast | None = None

    def show(
        self, message: str, kind: ToastKind | str = ToastKind.INFO
    ) -> Toast:
        self.dismiss()
        kind = ToastKind(kind)
        toast = Toast(message, kind, self.parent, rtl=self.rtl)
        # Mirror the anchor corner for right-to-left locales.
        if self.rtl:
            x = self.MARGIN
        else:
            x = self.parent.width() - toast.width() - self.MARGIN
        y = self.parent.height() - toast.height() - self.MARGIN
        toast.move(max(x, self.MARGIN), max(y, self.MARGIN))
        toast.raise_()
        toast.show()
        QTimer.singleShot(kind.duration_ms, toast.close)
        self.last_toast = toast
        return toast

    def error(self, message: str) -> Toast:
        return self.show(message, ToastKind.ERROR)

    def dismiss(self) -> None:
        if self.last_toast is not None:
            self.last_toast.close()
