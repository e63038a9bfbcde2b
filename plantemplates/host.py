"""
Host application capabilities used when applying a template.
"""

from pathlib import Path
from typing import Callable, List, Optional, Protocol

from . import console


class ProjectHost(Protocol):
    """What the template dialog needs from the application hosting it."""

    def is_dirty(self) -> bool:
        """Return True if the current project has unsaved modifications."""
        ...

    def save(self) -> None:
        """Save the current project."""
        ...

    def stop_execution(self) -> None:
        """Stop any running test before the project is replaced."""
        ...

    def load_project_file(self, path: Path, is_full_replace: bool) -> None:
        """Load path as the active project, or merge it into the current one."""
        ...


class ProjectSession:
    """Standalone host tracking the loaded project and its state."""

    def __init__(self, on_save: Optional[Callable[["ProjectSession"], None]] = None):
        self._on_save = on_save
        self.dirty = False
        self.running = False
        self.project_path: Optional[Path] = None
        self.fragments: List[Path] = []

    def is_dirty(self) -> bool:
        return self.dirty

    def mark_dirty(self):
        self.dirty = True

    def save(self):
        if self._on_save is not None:
            self._on_save(self)
        self.dirty = False
        console.log(f"Saved [emph]{self.project_path or 'untitled plan'}[/]")

    def stop_execution(self):
        if self.running:
            console.log("Stopping running test")
        self.running = False

    def load_project_file(self, path: Path, is_full_replace: bool):
        path = Path(path)
        if is_full_replace or self.project_path is None:
            self.project_path = path
            self.fragments = []
            console.log(f"Loaded test plan [emph]{path}[/]")
        else:
            self.fragments.append(path)
            console.log(f"Merged [emph]{path}[/] into [emph]{self.project_path}[/]")
        self.dirty = False
