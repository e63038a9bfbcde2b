"""
Template selection dialog for PlanTemplates.
"""

from enum import Enum
from pathlib import Path

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
)

from ..apply import apply_template
from ..constants import Dimensions, Labels
from ..errors import TemplateCopyError
from ..host import ProjectHost
from ..registry import Template, TemplateRegistry
from .dialog_utils import center_in_screen, with_return_hint
from .unsaved_changes_dialog import UnsavedChangesDialog


class SelectTemplateDialog(QDialog):
    """Pick a template, preview its description and instantiate it."""

    class State(str, Enum):
        IDLE = "idle"
        SELECTING = "selecting"
        CONFIRMING = "confirming"
        APPLIED = "applied"

    # Emitted with the copied file once the host has loaded it
    template_applied = pyqtSignal(object)

    def __init__(
        self,
        registry: TemplateRegistry,
        host: ProjectHost,
        home_dir: Path,
        working_dir: Path | None = None,
        parent=None,
    ):
        """
        Create the template selection dialog.

        Args:
            registry: Templates offered to the user
            host: Application that owns the current test plan
            home_dir: Installation home the template files live in
            working_dir: Where applied templates are copied, defaults to the
                current directory at apply time
            parent: Parent widget
        """
        super().__init__(parent)
        self.setWindowTitle(Labels.DIALOG_TITLE)
        self.setModal(True)
        self.registry = registry
        self.host = host
        self.home_dir = Path(home_dir)
        self.working_dir = working_dir
        self._state = self.State.IDLE

        choose_label = QLabel(Labels.CHOOSE_TEMPLATE)
        self.template_choice = QComboBox()
        self.template_choice.addItems(registry.list_names())
        choose_label.setBuddy(self.template_choice)

        choice_row = QHBoxLayout()
        choice_row.addWidget(choose_label)
        choice_row.addWidget(self.template_choice, 1)

        self.help_doc = QTextBrowser()
        self.help_doc.setReadOnly(True)
        self.help_doc.setOpenExternalLinks(True)

        self.apply_button = QPushButton()
        self.apply_button.setProperty("class", "defaultDialogButton")
        self.cancel_button = QPushButton(Labels.CANCEL)
        self.cancel_button.setShortcut(Qt.Key.Key_Escape)

        self.apply_button.clicked.connect(self.check_dirty_and_load)
        self.cancel_button.clicked.connect(self.reject)
        self.template_choice.currentTextChanged.connect(self._on_template_changed)

        # Enter applies from anywhere in the dialog
        for key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(self.check_dirty_and_load)

        button_row = QHBoxLayout()
        button_row.addStretch(1)
        button_row.addWidget(self.apply_button)
        button_row.addWidget(self.cancel_button)
        button_row.addStretch(1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            Dimensions.DIALOG_MARGIN, Dimensions.DIALOG_MARGIN,
            Dimensions.DIALOG_MARGIN, Dimensions.DIALOG_MARGIN,
        )
        layout.setSpacing(Dimensions.DIALOG_SPACING)
        layout.addLayout(choice_row)
        layout.addWidget(self.help_doc, 1)
        layout.addLayout(button_row)

        self._populate_template_page()
        self.setMinimumSize(Dimensions.DIALOG_MIN_WIDTH, Dimensions.DIALOG_MIN_HEIGHT)
        center_in_screen(self, Dimensions.DIALOG_SCREEN_PERCENT)

    @property
    def state(self) -> "SelectTemplateDialog.State":
        return self._state

    @property
    def selected_template(self) -> Template | None:
        name = self.template_choice.currentText()
        if not name:
            return None
        return self.registry.get_by_name(name)

    def select_template(self, name: str):
        """Select name in the template list, updating the preview."""
        index = self.template_choice.findText(name)
        if index < 0:
            # Surfaces the missing name the same way a lookup would
            self.registry.get_by_name(name)
        self.template_choice.setCurrentIndex(index)

    def _on_template_changed(self, _name: str):
        self._state = self.State.SELECTING
        self._populate_template_page()
        self._state = self.State.IDLE

    def _populate_template_page(self):
        template = self.selected_template
        if template is None:
            self.help_doc.clear()
            self.apply_button.setText(with_return_hint(Labels.CREATE_FROM))
            self.apply_button.setEnabled(False)
            return

        self.help_doc.setHtml(template.description)
        label = Labels.CREATE_FROM if template.is_full_project else Labels.MERGE_FROM
        self.apply_button.setText(with_return_hint(label))
        self.apply_button.setEnabled(True)

    def _ask_unsaved_changes(self) -> UnsavedChangesDialog.Choice:
        dialog = UnsavedChangesDialog(self)
        dialog.exec()
        return dialog.choice

    def check_dirty_and_load(self) -> Path | None:
        """
        Apply the selected template, asking first if the plan has unsaved changes.

        Returns:
            The copied file, or None when nothing was applied.

        Raises:
            TemplateCopyError: The template could not be copied. The dialog
                stays open.
        """
        template = self.selected_template
        if template is None or self._state == self.State.APPLIED:
            return None

        self._state = self.State.CONFIRMING
        if self.host.is_dirty():
            choice = self._ask_unsaved_changes()
            if choice == UnsavedChangesDialog.Choice.CANCEL:
                self._state = self.State.IDLE
                return None
            if choice == UnsavedChangesDialog.Choice.SAVE:
                self.host.save()

        self.host.stop_execution()
        try:
            destination = apply_template(
                template, self.host, self.home_dir, self.working_dir
            )
        except TemplateCopyError:
            self._state = self.State.IDLE
            raise

        self._state = self.State.APPLIED
        self.template_applied.emit(destination)
        self.accept()
        return destination
