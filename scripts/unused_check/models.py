"""
Data models for unused checker.
Pure dataclasses - no business logic.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Tuple

# Binding kinds
NAMESPACE = 'namespace'
DEFAULT = 'default'
NAMED = 'named'
REQUIRE = 'require'
DYNAMIC = 'dynamic'


@dataclass(frozen=True)
class ImportedBinding:
    """A local name introduced by an import statement."""
    kind: str
    local_name: str
    original_name: str
    line: int = 0

    @property
    def is_renamed(self) -> bool:
        return self.local_name != self.original_name


@dataclass(frozen=True)
class ImportEdge:
    """One import statement resolved to an in-tree file."""
    target: Path
    specifier: str
    bindings: Tuple[ImportedBinding, ...]
    line: int
    span: Tuple[int, int]  # (start, end) offsets in the importing file


@dataclass(frozen=True)
class SourceFile:
    """An analyzed file. Immutable once read."""
    path: Path
    content: str
    exports: FrozenSet[str]
    imports: Tuple[ImportEdge, ...]


@dataclass(frozen=True)
class UnusedFile:
    """A file never reached from any entry point."""
    path: Path


@dataclass(frozen=True)
class UnusedImport:
    """An imported binding with no usage in the importing file."""
    file: Path
    target: Path
    binding: ImportedBinding
    line: int


@dataclass(frozen=True)
class UnusedFileImport:
    """A file imported somewhere but none of its bindings are used."""
    file: Path
    target: Path
    line: int
