"""
Configuration for unused checker.
Resolution constants plus optional YAML overrides.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

# Resolution order matters: first match wins
EXTENSIONS = ['.ts', '.tsx', '.js', '.jsx']

# Type declaration files are never analyzed
DECLARATION_SUFFIX = '.d.ts'

# Directories skipped while scanning (hidden dirs are always skipped)
IGNORE_DIRS = ['node_modules']

# Source root, relative to the working directory
DEFAULT_ROOT = 'src'

# Entry points that are always "used", relative to the source root
ENTRY_POINTS = ['index.ts']

# Router/middleware methods whose call arguments count as usage
FRAMEWORK_METHODS = ('use', 'get', 'post', 'put', 'delete', 'patch')

CONFIG_KEYS = {'root', 'entry_points', 'extensions', 'ignore_dirs'}


@dataclass
class Settings:
    """Resolved run settings. Entries are relative to root."""
    root: Path
    entries: List[str] = field(default_factory=lambda: list(ENTRY_POINTS))
    extensions: List[str] = field(default_factory=lambda: list(EXTENSIONS))
    ignore_dirs: List[str] = field(default_factory=lambda: list(IGNORE_DIRS))

    def __post_init__(self):
        self.root = Path(self.root).resolve()

    @property
    def entry_points(self) -> List[Path]:
        return [Path(os.path.normpath(self.root / e)) for e in self.entries]


def _string_list(data: dict, key: str) -> Optional[List[str]]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{key}' must be a string or a list of strings")
    return value


def load_settings(config_path: Path) -> Settings:
    """Load settings from a YAML file.

    The root is resolved against the config file's directory; entry points
    are relative to the root.

        root: src
        entry_points: [index.ts, worker.ts]
        extensions: [.ts, .tsx]
        ignore_dirs: [node_modules, dist]
    """
    config_path = Path(config_path)
    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level")

    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        raise ValueError(f"{config_path}: unknown keys {unknown}")

    root = data.get('root', DEFAULT_ROOT)
    if not isinstance(root, str):
        raise ValueError("'root' must be a string")

    settings = Settings(root=config_path.parent / root)

    entries = _string_list(data, 'entry_points')
    if entries:
        settings.entries = entries

    extensions = _string_list(data, 'extensions')
    if extensions is not None:
        if not extensions:
            raise ValueError("'extensions' must not be empty")
        settings.extensions = [e if e.startswith('.') else f'.{e}' for e in extensions]

    ignore_dirs = _string_list(data, 'ignore_dirs')
    if ignore_dirs is not None:
        settings.ignore_dirs = ignore_dirs

    return settings
