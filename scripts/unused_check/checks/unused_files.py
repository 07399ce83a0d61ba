"""
Unused file detection - files no entry point reaches.
"""

from pathlib import Path
from typing import Callable, List, Set

from ..models import UnusedFile


def check_unused_files(
    files: List[Path],
    reachable: Set[Path],
    log: Callable[[str], None] = lambda x: None
) -> List[UnusedFile]:
    """Files not in the reachability set, in scan order."""
    unused = []

    for path in files:
        if path not in reachable:
            unused.append(UnusedFile(path=path))
            log(f"Unreached: {path}")

    return unused
