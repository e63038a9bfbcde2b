#!/usr/bin/env python3
"""Command line access to the bundled test plan templates.

"""
#------------- Imports -------------#
import argparse
from pathlib import Path
#--- Custom imports ---#
from . import __version__, library
from .apply import apply_template
from .console import print, fail
from .errors import PlanTemplatesError
from .host import ProjectSession
from .registry import load_registry
#======================== Helper ========================#

def build_parser():
    """ Build the argument parser. """
    parser = argparse.ArgumentParser(
        prog='plantemplates',
        description='Create test plans from bundled templates.'
    )
    parser.add_argument(
        '--version', action='version', version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '--home', type=Path, default=None,
        help='Installation home holding templates/templates.yaml.'
    )
    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        '-l', '--list', action='store_true', help='List the available templates.'
    )
    actions.add_argument(
        '-s', '--show', metavar='NAME', help='Print the description of a template.'
    )
    actions.add_argument(
        '-a', '--apply', metavar='NAME',
        help='Copy a template into --into and load it.'
    )
    actions.add_argument(
        '--set-home', metavar='PATH', type=Path,
        help='Remember PATH as the installation home.'
    )
    actions.add_argument(
        '--clear-home', action='store_true',
        help='Forget the remembered installation home.'
    )
    parser.add_argument(
        '--into', type=Path, default=None,
        help='Directory receiving the applied template, defaults to the current one.'
    )
    return parser


def list_templates(registry):
    for template in registry:
        kind = '[plan]plan[/]' if template.is_full_project else '[fragment]fragment[/]'
        print(f'{template.name} ({kind}): {template.source_path}')


def show_template(registry, name):
    template = registry.get_by_name(name)
    print(f'[emph]{template.name}[/]')
    # Descriptions are HTML, keep rich from reading the tags as markup
    print(template.description, markup=False)


def apply_named_template(registry, name, home_dir, working_dir):
    template = registry.get_by_name(name)
    session = ProjectSession()
    destination = apply_template(template, session, home_dir, working_dir)
    print(f'[success]Created[/] {destination}')
    return session

#======================== Entry ========================#

def main(argv=None):
    """ Run the command line interface, returns the exit code. """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.into is not None and not args.apply:
        parser.error('--into requires --apply')

    if args.set_home is not None:
        library.set_home_dir(args.set_home.expanduser().resolve())
        print(f'[success]Installation home set to[/] {library.get_home_dir()}')
        return 0
    if args.clear_home:
        library.set_home_dir(None)
        print(f'[success]Installation home reset to[/] {library.get_home_dir()}')
        return 0

    home_dir = args.home if args.home is not None else library.get_home_dir()
    try:
        if not (args.list or args.show or args.apply):
            from .app import run
            run(home_dir)
            return 0

        registry = load_registry(home_dir)
        if args.list:
            list_templates(registry)
        elif args.show:
            show_template(registry, args.show)
        else:
            apply_named_template(registry, args.apply, home_dir, args.into)
    except PlanTemplatesError as exc:
        fail(str(exc))
        return 1
    return 0
