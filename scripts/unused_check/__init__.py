"""
Unused Checker - unused file and import detection for JS/TS trees.

Detects:
- Files never reached from an entry point via import/require
- Imported names never referenced in the importing file
- Files imported somewhere but never actually used there

Regex-based, not a parser: results are heuristic.

Usage:
    python -m unused_check [--path PATH] [--entry FILE] [--config FILE]
                           [--mode files|imports|all] [--report] [--verbose]
"""

from pathlib import Path
from typing import List, Set

from .config import Settings
from .models import SourceFile, UnusedFile, UnusedImport, UnusedFileImport
from .scanner import scan_files
from .graph import Corpus, trace_reachable
from .report import format_unused_files, format_unused_imports, generate_markdown_report
from .checks import check_unused_files, check_unused_imports

MODES = ('files', 'imports', 'all')


class UnusedChecker:
    """Main facade for unused checking."""

    def __init__(self, settings: Settings, verbose: bool = False):
        self.settings = settings
        self.root = settings.root
        self.verbose = verbose
        self.files: List[Path] = []
        self.sources: List[SourceFile] = []
        self.reachable: Set[Path] = set()
        self.unused_files: List[UnusedFile] = []
        self.unused_imports: List[UnusedImport] = []
        self.unused_file_imports: List[UnusedFileImport] = []
        self.corpus = Corpus(self.root, settings.extensions, self.log)
        self.mode = 'all'

    def log(self, msg: str) -> None:
        """Print if verbose mode."""
        if self.verbose:
            print(f"   {msg}")

    def run(self, mode: str = 'all') -> bool:
        """Run the selected analyses. Returns True if nothing unused."""
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}")
        self.mode = mode

        print("🔍 Scanning files...")
        self.files = scan_files(self.root, self.settings.extensions, self.settings.ignore_dirs, self.log)
        print(f"   Found {len(self.files)} files to analyze")

        print("🔗 Building import graph...")
        self.sources = self.corpus.load_all(self.files)

        if mode in ('files', 'all'):
            print("🌳 Tracing reachability from entry points...")
            self.reachable = trace_reachable(self.corpus, self.settings.entry_points, self.log)
            self.unused_files = check_unused_files(self.files, self.reachable, self.log)

        if mode in ('imports', 'all'):
            print("💀 Checking unused imports...")
            self.unused_imports, self.unused_file_imports = check_unused_imports(
                self.sources, self.corpus, self.log
            )

        return not (self.unused_files or self.unused_imports or self.unused_file_imports)

    def format_text(self) -> str:
        """Plain-text reports for the analyses that ran."""
        parts = []
        if self.mode in ('files', 'all'):
            parts.append(format_unused_files(self.unused_files, self.root))
        if self.mode in ('imports', 'all'):
            parts.append(format_unused_imports(self.unused_imports, self.unused_file_imports, self.root))
        return '\n'.join(parts)

    def get_report(self) -> str:
        """Generate markdown report."""
        return generate_markdown_report(
            self.root,
            len(self.files),
            self.unused_files,
            self.unused_imports,
            self.unused_file_imports,
        )

    def print_summary(self) -> None:
        """Print reports to console."""
        print("\n" + self.format_text())


__all__ = ['UnusedChecker', 'Settings']
