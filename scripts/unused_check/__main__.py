#!/usr/bin/env python3
"""
Entry point for unused_check module.

Usage:
    python -m unused_check [--path ROOT] [--entry FILE]... [--config FILE]
    python -m unused_check --mode imports --report --output unused.md
"""

import argparse
import sys
from pathlib import Path

from . import UnusedChecker, MODES
from .config import Settings, load_settings, DEFAULT_ROOT


def build_settings(args) -> Settings:
    """Config file first, CLI flags override."""
    if args.config:
        settings = load_settings(Path(args.config))
    else:
        settings = Settings(root=Path(DEFAULT_ROOT))

    if args.path:
        settings.root = Path(args.path).resolve()
    if args.entry:
        settings.entries = args.entry
    return settings


def main(argv=None):
    parser = argparse.ArgumentParser(description='Find unused files and imports')
    parser.add_argument('--path', type=str, help=f'Source root (default: {DEFAULT_ROOT})')
    parser.add_argument('--entry', action='append', help='Entry point relative to root (repeatable)')
    parser.add_argument('--config', type=str, help='YAML config file')
    parser.add_argument('--mode', choices=MODES, default='all', help='Analyses to run')
    parser.add_argument('--report', action='store_true', help='Generate markdown report')
    parser.add_argument('--output', type=str, help='Output file for report')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args)
    except (OSError, ValueError) as e:
        print(f"❌ Invalid config: {e}")
        sys.exit(1)

    if not settings.root.is_dir():
        print(f"❌ Path not found: {settings.root}")
        sys.exit(1)

    checker = UnusedChecker(settings, verbose=args.verbose)
    passed = checker.run(args.mode)

    if args.report:
        report = checker.get_report()
        if args.output:
            Path(args.output).write_text(report, encoding='utf-8')
            print(f"\n📄 Report written to: {args.output}")
        else:
            print("\n" + report)
    else:
        checker.print_summary()

    sys.exit(0 if passed else 1)


if __name__ == '__main__':
    main()
