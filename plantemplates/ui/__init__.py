from .select_template_dialog import SelectTemplateDialog
from .unsaved_changes_dialog import UnsavedChangesDialog
