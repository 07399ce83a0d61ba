"""
Import/export extraction for JS/TS files.

Regex scans over raw text, no parsing. Everything that turns source text
into syntactic facts lives here, so graph traversal and reporting never
touch the patterns directly.
"""

import re
from pathlib import Path
from typing import FrozenSet, List, Sequence

from .config import EXTENSIONS
from .models import (
    ImportEdge, ImportedBinding,
    NAMESPACE, DEFAULT, NAMED, REQUIRE, DYNAMIC,
)
from .resolver import resolve_import, is_within


# Regex patterns for JS/TS imports
IMPORT_FROM = re.compile(
    r"""\bimport\s+(?:type\s+)?(?P<clause>[\w$*{}\s,]+?)\s*\bfrom\s*(?P<q>['"])(?P<spec>[^'"\n]+)(?P=q)"""
)
IMPORT_SIDE_EFFECT = re.compile(r"""\bimport\s*(?P<q>['"])(?P<spec>[^'"\n]+)(?P=q)""")
IMPORT_DYNAMIC = re.compile(r"""\bimport\s*\(\s*(?P<q>['"])(?P<spec>[^'"\n]+)(?P=q)\s*\)""")
REQUIRE_CALL = re.compile(r"""\brequire\s*\(\s*(?P<q>['"])(?P<spec>[^'"\n]+)(?P=q)\s*\)""")
REEXPORT_FROM = re.compile(
    r"""\bexport\s*(?:type\s+)?(?:\*(?:\s*as\s+[\w$]+)?|\{[^}]*\})\s*from\s*(?P<q>['"])(?P<spec>[^'"\n]+)(?P=q)"""
)

NAMED_LIST = re.compile(r'\{([^}]*)\}')
NAMESPACE_CLAUSE = re.compile(r'\*\s*as\s+([\w$]+)')
DEFAULT_CLAUSE = re.compile(r'^\s*([\w$]+)\s*(?:,|$)')
NAMED_ITEM = re.compile(r'^\s*(?:type\s+)?([\w$]+)(?:\s+as\s+([\w$]+))?\s*$')

# Regex patterns for JS/TS exports
EXPORT_DECLARATION = re.compile(
    r'\bexport\s+(?:default\s+)?(?:declare\s+)?(?:abstract\s+)?(?:async\s+)?'
    r'(?:function\s*\*?\s*|(?:const\s+enum|const|let|var|class|interface|type|enum)\s+)([\w$]+)'
)
EXPORT_LIST = re.compile(r'\bexport\s*(?:type\s+)?\{([^}]*)\}')
EXPORT_NAMESPACE = re.compile(r'\bexport\s*\*\s*as\s+([\w$]+)')
EXPORT_DEFAULT = re.compile(r'\bexport\s+default\b')


def line_of(content: str, offset: int) -> int:
    """1-based line number of a character offset."""
    return content.count('\n', 0, offset) + 1


def _clause_bindings(content: str, clause: str, clause_start: int) -> List[ImportedBinding]:
    """Split an import clause into its bindings, in source order."""
    bindings = []

    default = DEFAULT_CLAUSE.match(clause)
    if default and default.group(1) != 'type':
        name = default.group(1)
        bindings.append(ImportedBinding(
            kind=DEFAULT, local_name=name, original_name=name,
            line=line_of(content, clause_start + default.start(1)),
        ))

    namespace = NAMESPACE_CLAUSE.search(clause)
    if namespace:
        name = namespace.group(1)
        bindings.append(ImportedBinding(
            kind=NAMESPACE, local_name=name, original_name=name,
            line=line_of(content, clause_start + namespace.start(1)),
        ))

    named = NAMED_LIST.search(clause)
    if named:
        for item in re.finditer(r'[^,]+', named.group(1)):
            m = NAMED_ITEM.match(item.group(0))
            if not m:
                continue
            original = m.group(1)
            local = m.group(2) or original
            local_group = 2 if m.group(2) else 1
            offset = clause_start + named.start(1) + item.start() + m.start(local_group)
            bindings.append(ImportedBinding(
                kind=NAMED, local_name=local, original_name=original,
                line=line_of(content, offset),
            ))

    return bindings


def extract_imports(
    content: str,
    file_path: Path,
    root: Path,
    extensions: Sequence[str] = EXTENSIONS
) -> List[ImportEdge]:
    """Extract in-tree import edges from a file, ordered by position.

    Specifiers that don't resolve, or resolve outside root, are external
    and dropped.
    """
    found = []  # (start, end, specifier, bindings)

    for match in IMPORT_FROM.finditer(content):
        bindings = _clause_bindings(content, match.group('clause'), match.start('clause'))
        found.append((match.start(), match.end(), match.group('spec'), bindings))

    for match in IMPORT_SIDE_EFFECT.finditer(content):
        found.append((match.start(), match.end(), match.group('spec'), []))

    for match in REEXPORT_FROM.finditer(content):
        found.append((match.start(), match.end(), match.group('spec'), []))

    for pattern, kind in ((REQUIRE_CALL, REQUIRE), (IMPORT_DYNAMIC, DYNAMIC)):
        for match in pattern.finditer(content):
            binding = ImportedBinding(
                kind=kind, local_name='default', original_name='default',
                line=line_of(content, match.start()),
            )
            found.append((match.start(), match.end(), match.group('spec'), [binding]))

    edges = []
    for start, end, specifier, bindings in sorted(found, key=lambda f: f[0]):
        resolved = resolve_import(file_path, specifier, extensions)
        if resolved is None or not is_within(resolved, root):
            continue
        edges.append(ImportEdge(
            target=resolved,
            specifier=specifier,
            bindings=tuple(bindings),
            line=line_of(content, start),
            span=(start, end),
        ))

    return edges


def extract_exports(content: str) -> FrozenSet[str]:
    """Extract exported names; a default export adds 'default'."""
    exports = set()

    for match in EXPORT_DECLARATION.finditer(content):
        exports.add(match.group(1))

    for match in EXPORT_LIST.finditer(content):
        for item in match.group(1).split(','):
            parts = re.split(r'\s+as\s+', item.strip())
            name = parts[-1].strip()
            if name.startswith('type '):
                name = name[len('type '):].strip()
            if name:
                exports.add(name)

    for match in EXPORT_NAMESPACE.finditer(content):
        exports.add(match.group(1))

    if EXPORT_DEFAULT.search(content):
        exports.add('default')

    return frozenset(exports)
