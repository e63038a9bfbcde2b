"""
Shared helpers for dialog buttons and placement.
"""

from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QPushButton, QWidget

RETURN_KEY_SYMBOL = "↩"


def with_return_hint(label: str) -> str:
    return f"{label} {RETURN_KEY_SYMBOL}"


def style_default_dialog_button(button: QPushButton):
    button.setProperty("class", "defaultDialogButton")
    text = button.text()
    if RETURN_KEY_SYMBOL not in text:
        button.setText(with_return_hint(text))
    button.setDefault(True)
    button.setAutoDefault(True)


def center_in_screen(widget: QWidget, percent: int):
    """Resize widget to percent of the available screen and center it."""
    screen = widget.screen() or QGuiApplication.primaryScreen()
    if screen is None:
        return
    available = screen.availableGeometry()
    width = max(widget.minimumWidth(), available.width() * percent // 100)
    height = max(widget.minimumHeight(), available.height() * percent // 100)
    widget.resize(width, height)
    widget.move(
        available.x() + (available.width() - width) // 2,
        available.y() + (available.height() - height) // 2,
    )
