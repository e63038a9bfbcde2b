#!/usr/bin/env python3
"""Top-level init file to make package available for import.

Handles importing and setting project-wide fields.

"""
#------------- Fields -------------#
__version__ = '0.3.0'
#------------- Imports -------------#
from .errors import (
    PlanTemplatesError,
    TemplateNotFoundError,
    DuplicateTemplateError,
    TemplateIndexError,
    TemplateCopyError,
)
from .registry import Template, TemplateRegistry, load_registry
from .host import ProjectHost, ProjectSession
from .apply import apply_template
