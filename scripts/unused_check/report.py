"""
Report generation for unused checker.
Console and markdown output.
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from .models import UnusedFile, UnusedImport, UnusedFileImport


def rel(path: Path, root: Path) -> str:
    """Root-relative POSIX path, absolute if outside root."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def describe_binding(finding: UnusedImport) -> str:
    binding = finding.binding
    if binding.is_renamed:
        return f"{binding.original_name} as {binding.local_name}"
    return binding.local_name


def group_by_target(findings: List[UnusedFileImport], root: Path) -> Dict[str, List[UnusedFileImport]]:
    """Group file-level findings by imported file, first-seen order."""
    grouped: Dict[str, List[UnusedFileImport]] = defaultdict(list)
    for f in findings:
        grouped[rel(f.target, root)].append(f)
    return grouped


def format_unused_files(unused: List[UnusedFile], root: Path) -> str:
    lines = ["UNUSED FILES:"]
    lines.extend(rel(u.path, root) for u in unused)
    return '\n'.join(lines)


def format_unused_imports(
    unused_imports: List[UnusedImport],
    unused_file_imports: List[UnusedFileImport],
    root: Path
) -> str:
    lines = ["", "=== UNUSED IMPORTS ===", ""]
    if not unused_imports:
        lines.append("No unused imports found!")
    for u in unused_imports:
        lines.append(
            f"{rel(u.file, root)}:{u.line} - Unused {u.binding.kind} import "
            f"'{describe_binding(u)}' from '{rel(u.target, root)}'"
        )

    lines.extend(["", "=== FILES IMPORTED BUT NOT USED ===", ""])
    if not unused_file_imports:
        lines.append("No unused file imports found!")
    for target, usages in group_by_target(unused_file_imports, root).items():
        lines.append("")
        lines.append(f"{target}:")
        for u in usages:
            lines.append(f"  - Imported in {rel(u.file, root)}:{u.line} but not used")

    return '\n'.join(lines)


def generate_markdown_report(
    root: Path,
    files_analyzed: int,
    unused_files: List[UnusedFile],
    unused_imports: List[UnusedImport],
    unused_file_imports: List[UnusedFileImport]
) -> str:
    """Generate markdown report."""
    total = len(unused_files) + len(unused_imports) + len(unused_file_imports)
    lines = [
        "# Unused Code Report",
        "",
        f"**Path:** `{root}`",
        f"**Files analyzed:** {files_analyzed}",
        f"**Findings:** {total}",
        "",
    ]

    if total == 0:
        lines.append("✅ **Nothing unused found!**")
        return '\n'.join(lines)

    if unused_files:
        lines.append("## Unused Files")
        lines.append("")
        for u in unused_files:
            lines.append(f"- `{rel(u.path, root)}`")
        lines.append("")

    if unused_imports:
        lines.append("## Unused Imports")
        lines.append("")
        lines.append("| File | Line | Kind | Name | From |")
        lines.append("|------|------|------|------|------|")
        for u in unused_imports:
            lines.append(
                f"| `{rel(u.file, root)}` | {u.line} | {u.binding.kind} "
                f"| `{describe_binding(u)}` | `{rel(u.target, root)}` |"
            )
        lines.append("")

    if unused_file_imports:
        lines.append("## Files Imported But Not Used")
        lines.append("")
        for target, usages in group_by_target(unused_file_imports, root).items():
            lines.append(f"### `{target}`")
            lines.append("")
            for u in usages:
                lines.append(f"- imported in `{rel(u.file, root)}:{u.line}`")
            lines.append("")

    return '\n'.join(lines)
