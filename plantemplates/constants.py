"""
Central location for all constants used throughout PlanTemplates.
Provides easy customization and better maintainability.
"""

# ============================================================================
# Labels
# ============================================================================

class Labels:
    """User-facing strings."""

    DIALOG_TITLE = "Templates"
    CHOOSE_TEMPLATE = "Select Template:"
    CREATE_FROM = "Create"
    MERGE_FROM = "Merge"
    CANCEL = "Cancel"

    # Unsaved changes prompt
    UNSAVED_TITLE = "Unsaved Changes"
    UNSAVED_MESSAGE = "The current test plan has unsaved changes."
    UNSAVED_QUESTION = "Do you want to save them before loading the template?"
    SAVE = "Save"
    DISCARD = "Discard"


# ============================================================================
# UI Widget Dimensions
# ============================================================================

class Dimensions:
    """Size constants for UI widgets."""

    # Minimal dialog box
    DIALOG_MIN_WIDTH = 500
    DIALOG_MIN_HEIGHT = 300
    # Share of the available screen used for the initial dialog size
    DIALOG_SCREEN_PERCENT = 50

    # Margins and spacing
    DIALOG_MARGIN = 10
    DIALOG_SPACING = 10
    PROMPT_MARGIN_H = 20
    PROMPT_MARGIN_V = 16
    PROMPT_SPACING = 12


# ============================================================================
# File System
# ============================================================================

class FileSystem:
    """File system related constants."""

    # Template index, relative to the installation home
    TEMPLATE_INDEX = "templates/templates.yaml"

    # Bundled installation home, relative to the package
    RESOURCES_DIR = "resources"

    PREFERENCES_FILE = "preferences.yaml"

    # Environment overrides
    HOME_ENV_VAR = "PLANTEMPLATES_HOME"
    SUPPORT_DIR_ENV_VAR = "PLANTEMPLATES_SUPPORT_DIR"


# ============================================================================
# Application Info
# ============================================================================

class App:
    """Application-level constants."""

    NAME = "PlanTemplates"


# ============================================================================
# Colors
# ============================================================================

class Colors:
    """Color constants used by the dialogs."""

    PRIMARY_GREEN = "#4CAF50"
    ERROR_RED = "#E74C3C"
    MUTED_GREY = "#6C7086"
    BUTTON_TEXT = "#FFFFFF"
