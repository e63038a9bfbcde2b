"""
Copies a template into the working directory and hands it to the host.
"""

import shutil
from pathlib import Path
from typing import Optional

from . import console
from .errors import TemplateCopyError
from .host import ProjectHost
from .registry import Template


def resolve_paths(template: Template, home_dir: Path, working_dir: Optional[Path] = None):
    """Return the (source, destination) paths for template."""
    source = Path(home_dir) / template.source_path
    if working_dir is None:
        working_dir = Path.cwd()
    return source, Path(working_dir) / template.file_name


def copy_template_file(source: Path, destination: Path):
    """Copy source to destination byte for byte, overwriting it.

    Copying a file onto itself fails instead of truncating it."""
    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise TemplateCopyError(source, destination, exc.strerror or str(exc)) from exc


def apply_template(
    template: Template,
    host: ProjectHost,
    home_dir: Path,
    working_dir: Optional[Path] = None,
) -> Path:
    """
    Instantiate template in working_dir and load it through host.

    Args:
        template: The template to apply
        host: Application receiving the copied file
        home_dir: Installation home the template's source path is relative to
        working_dir: Destination directory, defaults to the current directory

    Returns:
        The path of the copied file.

    Raises:
        TemplateCopyError: The copy failed. Nothing is loaded and any partial
            destination file is left in place.
    """
    source, destination = resolve_paths(template, home_dir, working_dir)
    copy_template_file(source, destination)
    console.log(f'Copied template [emph]{template.name}[/] to {destination}')

    host.load_project_file(destination, template.is_full_project)
    return destination
