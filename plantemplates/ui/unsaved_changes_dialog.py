"""
Unsaved changes dialog for PlanTemplates.
"""

from enum import Enum

from PyQt6.QtWidgets import (
    QDialog,
    QLabel,
    QPushButton,
    QHBoxLayout,
    QVBoxLayout,
)

from ..constants import Dimensions, Labels
from .dialog_utils import style_default_dialog_button


class UnsavedChangesDialog(QDialog):
    """Prompt the user when a template would replace a modified test plan."""

    class Choice(str, Enum):
        SAVE = "save"
        DISCARD = "discard"
        CANCEL = "cancel"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(Labels.UNSAVED_TITLE)
        self.setModal(True)
        # Closing the window counts as cancel
        self._choice = self.Choice.CANCEL

        title = QLabel(Labels.UNSAVED_MESSAGE)
        title.setWordWrap(True)

        subtitle = QLabel(Labels.UNSAVED_QUESTION)
        subtitle.setWordWrap(True)
        subtitle.setProperty("class", "muted")

        self.save_button = QPushButton(Labels.SAVE)
        self.discard_button = QPushButton(Labels.DISCARD)
        self.cancel_button = QPushButton(Labels.CANCEL)

        self.discard_button.setProperty("class", "dangerButton")
        style_default_dialog_button(self.save_button)

        self.save_button.clicked.connect(self._on_save)
        self.discard_button.clicked.connect(self._on_discard)
        self.cancel_button.clicked.connect(self.reject)

        button_row = QHBoxLayout()
        button_row.addStretch(1)
        button_row.addWidget(self.save_button)
        button_row.addWidget(self.discard_button)
        button_row.addWidget(self.cancel_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            Dimensions.PROMPT_MARGIN_H, Dimensions.PROMPT_MARGIN_V,
            Dimensions.PROMPT_MARGIN_H, Dimensions.PROMPT_MARGIN_V,
        )
        layout.setSpacing(Dimensions.PROMPT_SPACING)
        layout.addWidget(title)
        layout.addWidget(subtitle)
        layout.addLayout(button_row)

    def _on_save(self):
        self._choice = self.Choice.SAVE
        self.accept()

    def _on_discard(self):
        self._choice = self.Choice.DISCARD
        self.accept()

    @property
    def choice(self) -> "UnsavedChangesDialog.Choice":
        return self._choice
