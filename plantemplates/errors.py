"""
Exceptions raised by PlanTemplates.
"""


class PlanTemplatesError(Exception):
    """Base class for all PlanTemplates errors."""


class TemplateNotFoundError(PlanTemplatesError, KeyError):
    """Raised when a template name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f'No template named "{self.name}".'


class DuplicateTemplateError(PlanTemplatesError):
    """Raised when two templates share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Template "{name}" is registered more than once.')


class TemplateIndexError(PlanTemplatesError):
    """Exception for unreadable or malformed template index files."""

    def __init__(self, message: str, path=None, line: int | None = None):
        self.message = message
        self.path = path
        self.line = line
        if path and line:
            super().__init__(f"{message} ({path}, line {line})")
        elif path:
            super().__init__(f"{message} ({path})")
        else:
            super().__init__(message)


class TemplateCopyError(PlanTemplatesError):
    """Raised when a template file cannot be copied into the working directory."""

    def __init__(self, source, destination, reason: str):
        self.source = source
        self.destination = destination
        super().__init__(f'Could not copy "{source}" to "{destination}": {reason}')
