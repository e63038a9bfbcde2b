"""
PlanTemplates application entrypoint.
"""

import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from . import __version__, library
from .constants import App
from .host import ProjectSession
from .registry import load_registry
from .styles import get_ui_font, load_qss
from .ui.select_template_dialog import SelectTemplateDialog


def run(home_dir: Path | None = None):
    """Run the PlanTemplates application."""
    if home_dir is None:
        home_dir = library.get_home_dir()
    registry = load_registry(home_dir)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(App.NAME)
    app.setApplicationVersion(__version__)
    app.setFont(get_ui_font())
    app.setStyleSheet(load_qss())
    session = ProjectSession()

    dialog = SelectTemplateDialog(registry, session, home_dir)
    dialog.exec()
    return session
