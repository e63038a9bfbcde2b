"""Widget tests for the unsaved changes prompt."""

import pytest
from PyQt6.QtWidgets import QDialog

from plantemplates.ui.unsaved_changes_dialog import UnsavedChangesDialog


@pytest.fixture
def prompt(qtbot):
    dialog = UnsavedChangesDialog()
    qtbot.addWidget(dialog)
    return dialog


def test_defaults_to_cancel(prompt):
    assert prompt.choice == UnsavedChangesDialog.Choice.CANCEL


def test_save_button(prompt):
    prompt.save_button.click()

    assert prompt.choice == UnsavedChangesDialog.Choice.SAVE
    assert prompt.result() == QDialog.DialogCode.Accepted.value


def test_discard_button(prompt):
    prompt.discard_button.click()

    assert prompt.choice == UnsavedChangesDialog.Choice.DISCARD
    assert prompt.result() == QDialog.DialogCode.Accepted.value


def test_cancel_button(prompt):
    prompt.cancel_button.click()

    assert prompt.choice == UnsavedChangesDialog.Choice.CANCEL
    assert prompt.result() == QDialog.DialogCode.Rejected.value
