"""
Unused import detection.

Two passes over every import edge:
- binding level: each imported name with no usage after its import
- file level: an imported file whose bindings are all unused

Files with no exports are assumed side-effect only and never reported
at file level.
"""

from typing import Callable, List, Set, Tuple
from pathlib import Path

from ..graph import Corpus
from ..models import SourceFile, UnusedImport, UnusedFileImport
from ..usage import is_binding_used


def check_unused_imports(
    sources: List[SourceFile],
    corpus: Corpus,
    log: Callable[[str], None] = lambda x: None
) -> Tuple[List[UnusedImport], List[UnusedFileImport]]:
    """Return (unused bindings, imported-but-unused files)."""
    unused_imports: List[UnusedImport] = []
    unused_files: List[UnusedFileImport] = []
    reported: Set[Tuple[Path, Path]] = set()

    for source in sources:
        for edge in source.imports:
            used_any = False
            for binding in edge.bindings:
                if is_binding_used(source.content, edge, binding):
                    used_any = True
                    continue
                unused_imports.append(UnusedImport(
                    file=source.path,
                    target=edge.target,
                    binding=binding,
                    line=binding.line or edge.line,
                ))
                log(f"Unused {binding.kind} '{binding.local_name}': {source.path}:{binding.line}")

            if used_any or not edge.bindings:
                continue
            if not corpus.exports_of(edge.target):
                log(f"No exports, assumed side-effect import: {edge.target}")
                continue

            key = (source.path, edge.target)
            if key in reported:
                continue
            reported.add(key)
            unused_files.append(UnusedFileImport(
                file=source.path,
                target=edge.target,
                line=edge.line,
            ))

    return unused_imports, unused_files
