"""
Import specifier resolution.
Maps a relative specifier to the file it refers to on disk.
"""

import os
from pathlib import Path
from typing import Optional, Sequence

from .config import EXTENSIONS


def is_within(path: Path, root: Path) -> bool:
    """Check if path lies inside root (component-wise, not string prefix)."""
    return path == root or root in path.parents


def resolve_import(
    from_file: Path,
    specifier: str,
    extensions: Sequence[str] = EXTENSIONS
) -> Optional[Path]:
    """Resolve a relative import specifier to an existing file.

    Returns None for bare specifiers (external packages) and for anything
    that does not exist on disk. Extension order is precedence order:
    `<path><ext>` for every extension is tried before `<path>/index<ext>`.
    """
    if not specifier.startswith('.'):
        return None

    resolved = Path(os.path.normpath(os.path.join(str(from_file.parent), specifier)))

    if resolved.is_file():
        return resolved

    for ext in extensions:
        candidate = Path(str(resolved) + ext)
        if candidate.is_file():
            return candidate

    # Directory index fallback; covers `<dir>/index<primary ext>` too
    for ext in extensions:
        candidate = resolved / f'index{ext}'
        if candidate.is_file():
            return candidate

    return None
