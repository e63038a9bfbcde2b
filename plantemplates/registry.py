"""
Template registry for PlanTemplates.
Holds the named test plan templates offered for quick instantiation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

import yaml

from .constants import FileSystem
from .errors import DuplicateTemplateError, TemplateIndexError, TemplateNotFoundError


@dataclass(frozen=True)
class Template:
    """A template bundled with the installation."""
    name: str
    description: str
    source_path: str
    # False for fragments merged into the current plan
    is_full_project: bool = True

    @property
    def file_name(self) -> str:
        """Base name of the backing file."""
        return self.source_path.replace("\\", "/").rsplit("/", 1)[-1]


class TemplateRegistry:
    """Read-only, ordered collection of templates keyed by name."""

    def __init__(self, templates: Iterable[Template] = ()):
        self._templates: Dict[str, Template] = {}
        for template in templates:
            if template.name in self._templates:
                raise DuplicateTemplateError(template.name)
            self._templates[template.name] = template

    @classmethod
    def from_index(cls, path: Path) -> "TemplateRegistry":
        """Build a registry from a YAML template index file."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateIndexError(f"Cannot read template index: {exc}", path) from exc

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            line = None
            if hasattr(exc, 'problem_mark') and exc.problem_mark:
                line = exc.problem_mark.line + 1
            raise TemplateIndexError("Invalid YAML in template index", path, line) from exc

        if data is None:
            return cls()
        if not isinstance(data, dict) or not isinstance(data.get("templates", []), list):
            raise TemplateIndexError('Template index must contain a "templates" list', path)

        return cls(
            _template_from_entry(entry, index, path)
            for index, entry in enumerate(data.get("templates") or [], start=1)
        )

    def list_names(self) -> List[str]:
        """Return all template names in registration order."""
        return list(self._templates)

    def get_by_name(self, name: str) -> Template:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def __contains__(self, name) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)


def _template_from_entry(entry, index: int, path: Path) -> Template:
    if not isinstance(entry, dict):
        raise TemplateIndexError(f"Template entry {index} must be a mapping", path)
    for key in ("name", "file"):
        value = entry.get(key)
        if not isinstance(value, str) or not value.strip():
            raise TemplateIndexError(
                f'Template entry {index} is missing a "{key}" value', path
            )
    test_plan = entry.get("test_plan", True)
    if not isinstance(test_plan, bool):
        raise TemplateIndexError(
            f'Template entry {index} has a non-boolean "test_plan" value', path
        )
    return Template(
        name=entry["name"].strip(),
        description=str(entry.get("description") or ""),
        source_path=entry["file"].strip(),
        is_full_project=test_plan,
    )


def load_registry(home_dir: Path) -> TemplateRegistry:
    """Load the registry shipped with the installation at home_dir."""
    return TemplateRegistry.from_index(Path(home_dir) / FileSystem.TEMPLATE_INDEX)
