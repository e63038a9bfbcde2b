"""
Persistence layer for PlanTemplates.
Handles user preferences and resolution of the installation home.
"""

import os
import sys
import yaml
from pathlib import Path
from typing import Dict, Optional

from .constants import App, FileSystem

HOME_DIR_PREF_KEY = "home_dir"

# Preference caching - reduces YAML parsing overhead
_preferences_cache = None
_preferences_mtime = None


def get_resource_path(relative_path: str) -> Path:
    """Get the absolute path to a bundled resource, works for dev and PyInstaller."""
    module_path = Path(__file__).parent / relative_path
    if module_path.exists():
        return module_path

    if hasattr(sys, "_MEIPASS"):
        bundled_path = Path(sys._MEIPASS) / relative_path
        if bundled_path.exists():
            return bundled_path

    return module_path


def get_app_support_dir() -> Path:
    """Return the per-user application support directory."""
    override = os.environ.get(FileSystem.SUPPORT_DIR_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / App.NAME
    return Path.home() / ".config" / App.NAME.lower()


def get_preferences_path() -> Path:
    return get_app_support_dir() / FileSystem.PREFERENCES_FILE


def get_bundled_home() -> Path:
    """Return the installation home shipped inside the package."""
    return get_resource_path(FileSystem.RESOURCES_DIR)


def get_home_dir() -> Path:
    """Return the installation home holding the templates.

    The environment override wins over the stored preference, which wins
    over the bundled resources.
    """
    env_value = os.environ.get(FileSystem.HOME_ENV_VAR, "")
    if env_value.strip():
        return Path(env_value.strip()).expanduser()
    return _get_path_preference(HOME_DIR_PREF_KEY, get_bundled_home())


def set_home_dir(home_dir: Optional[Path]):
    """Persist the installation home, or clear it when None."""
    _set_path_preference(HOME_DIR_PREF_KEY, home_dir)


def load_preferences() -> Dict:
    """Load user preferences from disk with caching."""
    global _preferences_cache, _preferences_mtime
    path = get_preferences_path()

    if not path.exists():
        return {}

    current_mtime = path.stat().st_mtime
    if _preferences_cache is not None and _preferences_mtime == (path, current_mtime):
        return _preferences_cache.copy()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError:
        # A corrupt preferences file falls back to defaults
        return {}

    _preferences_cache = data if isinstance(data, dict) else {}
    _preferences_mtime = (path, current_mtime)
    return _preferences_cache.copy()


def save_preferences(prefs: Dict):
    """Save user preferences to disk and update cache."""
    global _preferences_cache, _preferences_mtime
    path = get_preferences_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(prefs, f, default_flow_style=False, allow_unicode=True)

    _preferences_cache = prefs.copy()
    _preferences_mtime = (path, path.stat().st_mtime)


def _get_path_preference(key: str, default: Path) -> Path:
    """Generic path preference getter with expansion."""
    prefs = load_preferences()
    path_value = prefs.get(key)
    if isinstance(path_value, str) and path_value.strip():
        return Path(path_value).expanduser()
    return default


def _set_path_preference(key: str, value: Optional[Path]):
    """Generic path preference setter with None handling."""
    prefs = load_preferences()
    if value is None:
        prefs.pop(key, None)
    else:
        path_value = str(value).strip()
        if path_value:
            prefs[key] = path_value
        else:
            prefs.pop(key, None)
    save_preferences(prefs)

