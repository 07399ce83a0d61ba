"""
Import graph for unused checker.
Memoized corpus of parsed files and reachability from entry points.
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from .config import EXTENSIONS
from .extract import extract_exports, extract_imports
from .models import SourceFile
from .resolver import is_within
from .scanner import read_content


class Corpus:
    """Every file read during a run, each read and parsed exactly once."""

    def __init__(
        self,
        root: Path,
        extensions: Sequence[str] = EXTENSIONS,
        log: Callable[[str], None] = lambda x: None
    ):
        self.root = root
        self.extensions = list(extensions)
        self.log = log
        self.files: Dict[Path, SourceFile] = {}

    def load(self, path: Path) -> Optional[SourceFile]:
        """Return the parsed file, reading it on first access.

        Returns None when the file is missing.
        """
        source = self.files.get(path)
        if source is not None:
            return source
        if not path.is_file():
            return None

        content = read_content(path)
        source = SourceFile(
            path=path,
            content=content,
            exports=extract_exports(content),
            imports=tuple(extract_imports(content, path, self.root, self.extensions)),
        )
        self.files[path] = source
        self.log(f"Parsed: {path} ({len(source.imports)} imports, {len(source.exports)} exports)")
        return source

    def load_all(self, paths: Iterable[Path]) -> List[SourceFile]:
        return [s for s in (self.load(p) for p in paths) if s is not None]

    def exports_of(self, path: Path) -> frozenset:
        source = self.load(path)
        return source.exports if source else frozenset()


def trace_reachable(
    corpus: Corpus,
    entry_points: Iterable[Path],
    log: Callable[[str], None] = lambda x: None
) -> Set[Path]:
    """Depth-first walk from entry points along resolved imports.

    Missing entry points are skipped. A target outside the root or missing
    on disk ends its branch.
    """
    visited: Set[Path] = set()

    for entry in entry_points:
        if not entry.is_file():
            log(f"Entry point not found: {entry}")
            continue

        stack = [entry]
        while stack:
            path = stack.pop()
            if path in visited or not is_within(path, corpus.root):
                continue
            visited.add(path)

            source = corpus.load(path)
            if source is None:
                continue

            # Reversed so the first import is explored first
            for edge in reversed(source.imports):
                if edge.target not in visited:
                    stack.append(edge.target)
                    log(f"Reached: {edge.target} <- {path}")

    return visited
