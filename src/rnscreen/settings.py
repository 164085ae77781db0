"""
Project discovery and path settings for rnscreen
"""
import os
import tomllib
import importlib.resources
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

OVERRIDES_FILE = 'rnscreen.toml'
PROJECT_MARKERS = (OVERRIDES_FILE, 'package.json')

# Tables a project may override in rnscreen.toml
OVERRIDABLE = ('paths', 'screen')


def load_defaults() -> Dict[str, Any]:
    """Load the config.toml shipped with the package"""
    config_file = importlib.resources.files('rnscreen') / 'config.toml'
    with config_file.open('rb') as f:
        return tomllib.load(f)


def find_project_root(start=None) -> Path:
    """Find the project root, walking up from start (default: cwd)"""
    current_dir = Path(start or os.getcwd()).resolve()

    for candidate in (current_dir, *current_dir.parents):
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate

    # No marker anywhere above us; treat the starting directory as the root
    return current_dir


def _load_overrides(project_root: Path) -> Dict[str, Any]:
    overrides_path = project_root / OVERRIDES_FILE
    if not overrides_path.exists():
        return {}

    try:
        with open(overrides_path, 'rb') as f:
            overrides = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid {OVERRIDES_FILE}: {e}") from e

    for table, values in overrides.items():
        if table not in OVERRIDABLE or not isinstance(values, dict):
            raise ValueError(f"Unsupported setting in {OVERRIDES_FILE}: [{table}]")
    return overrides


def load_config(project_root: Path) -> Dict[str, Any]:
    """Packaged defaults merged with the project's rnscreen.toml, if any"""
    config = load_defaults()

    for table, values in _load_overrides(project_root).items():
        for key, value in values.items():
            if key not in config[table]:
                raise ValueError(f"Unknown setting in {OVERRIDES_FILE}: {table}.{key}")
            if not isinstance(value, str) or not value:
                raise ValueError(f"Setting {table}.{key} must be a non-empty string")
            config[table][key] = value

    return config


@dataclass(frozen=True)
class ProjectLayout:
    """Resolved locations of everything rnscreen reads or writes"""
    root: Path
    screens_dir: Path
    screens_index: Path
    navigator: Path
    screen_props: Path
    entry_file: str = 'index.tsx'
    widgets_dir: str = 'widgets'

    @classmethod
    def from_config(cls, root: Path, config: Dict[str, Any]) -> 'ProjectLayout':
        paths = config['paths']
        screen = config['screen']
        return cls(
            root=root,
            screens_dir=root / paths['screens_dir'],
            screens_index=root / paths['screens_index'],
            navigator=root / paths['navigator'],
            screen_props=root / paths['screen_props'],
            entry_file=screen['entry_file'],
            widgets_dir=screen['widgets_dir'],
        )

    def screen_dir(self, name: str) -> Path:
        return self.screens_dir / name

    def screen_entry(self, name: str) -> Path:
        return self.screen_dir(name) / self.entry_file

    def screen_widgets(self, name: str) -> Path:
        return self.screen_dir(name) / self.widgets_dir

    def label(self, path: Path) -> str:
        """Short name used in console messages, e.g. 'screens/index.ts'"""
        src_dir = self.root / 'src'
        try:
            return path.relative_to(src_dir).as_posix()
        except ValueError:
            pass
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)


def load_layout(root=None) -> ProjectLayout:
    """Build the layout for an explicit root, or for the discovered one"""
    project_root = Path(root).resolve() if root else find_project_root()
    return ProjectLayout.from_config(project_root, load_config(project_root))
