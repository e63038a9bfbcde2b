#!/usr/bin/env python3
"""Configures the Rich console for pretty printing text and logging actions.

"""
#======================== Rich ========================#
#------------- Imports -------------#
import rich.theme
import rich.console
from rich.markup import escape
# Improved tracebacks
import rich.traceback; rich.traceback.install()
#------------- Settings -------------#
# Store colors as variables for use with library objects
cblue = '#0675BB'
cgreen = 'green'
# Custom theme
theme = rich.theme.Theme({
    # Syntax highlighting for numbers, light mint
    "repr.number": "#9DFBCC",
    #--- Colors ---#
    'green': cgreen,
    #--- Semantic colors ---#
    'success': cgreen,
    # Emphasis
    'emph': 'blue',
    # Softer red than a failure
    'warning': 'red',
    # Amaranth red
    'failure': '#E03E52',
    # Template kinds
    'plan': cblue,
    'fragment': 'magenta',
})
#--- Input and printing ---#
console = rich.console.Console(theme=theme)
# Errors go to stderr but keep the theme
error_console = rich.console.Console(theme=theme, stderr=True)
# Override
print = console.print
# Timestamped record of what the application did
log = console.log
#======================== End Rich ========================#


def fail(message):
    """ Print a failure message to stderr. """
    error_console.print(f'[failure]{escape(message)}[/]')
