"""
Style management for PlanTemplates.
Builds the dialog stylesheet and manages font fallbacks.
"""

from functools import lru_cache
from PyQt6.QtGui import QFont, QFontDatabase

from .constants import Colors


# UI font fallback list
UI_FONT_FALLBACKS = [
    "Fira Sans",
    "SF Pro Display",
    "Helvetica Neue",
    "Segoe UI",
    "Arial"
]

DEFAULT_UI_FONT_SIZE = 13

# Dynamic "class" properties set by the dialogs
DIALOG_QSS = f"""
QLabel[class="muted"] {{
    color: {Colors.MUTED_GREY};
}}
QPushButton[class="dangerButton"] {{
    background-color: {Colors.ERROR_RED};
    color: {Colors.BUTTON_TEXT};
    padding: 4px 12px;
}}
QPushButton[class="defaultDialogButton"] {{
    background-color: {Colors.PRIMARY_GREEN};
    color: {Colors.BUTTON_TEXT};
    padding: 4px 12px;
}}
"""


def load_qss() -> str:
    """Return the stylesheet shared by all PlanTemplates dialogs."""
    return DIALOG_QSS


@lru_cache(maxsize=1)
def _get_font_families() -> tuple:
    return tuple(QFontDatabase.families())


def get_available_font(fallbacks: list) -> str:
    """Get the first available font from the fallback list."""
    available_families = _get_font_families()

    for font_name in fallbacks:
        if font_name in available_families:
            return font_name

    return fallbacks[-1] if fallbacks else "sans-serif"


def get_ui_font(size: int = DEFAULT_UI_FONT_SIZE) -> QFont:
    """Get the best available UI font."""
    font_name = get_available_font(UI_FONT_FALLBACKS)
    font = QFont(font_name)
    font.setPointSize(size)
    return font
