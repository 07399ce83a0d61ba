"""
File scanner for unused checker.
Handles file discovery and reading.
"""

from pathlib import Path
from typing import Callable, List, Sequence

from .config import EXTENSIONS, IGNORE_DIRS, DECLARATION_SUFFIX


def should_ignore_dir(path: Path, ignore_dirs: Sequence[str] = IGNORE_DIRS) -> bool:
    """Check if directory should be skipped."""
    return path.name.startswith('.') or path.name in ignore_dirs


def is_source_file(path: Path, extensions: Sequence[str] = EXTENSIONS) -> bool:
    """Check if file has a recognized source extension."""
    return path.suffix in extensions and not path.name.endswith(DECLARATION_SUFFIX)


def read_content(path: Path) -> str:
    """Read a file fully. Filesystem errors propagate."""
    return path.read_text(encoding='utf-8', errors='replace')


def scan_files(
    root: Path,
    extensions: Sequence[str] = EXTENSIONS,
    ignore_dirs: Sequence[str] = IGNORE_DIRS,
    log: Callable[[str], None] = lambda x: None
) -> List[Path]:
    """List all source files under root, in sorted depth-first order."""
    files = []

    for path in sorted(root.iterdir()):
        if path.is_dir():
            if should_ignore_dir(path, ignore_dirs):
                log(f"Skipped: {path}")
                continue
            files.extend(scan_files(path, extensions, ignore_dirs, log))
        elif path.is_file() and is_source_file(path, extensions):
            files.append(path)
            log(f"Scanned: {path}")

    return files
