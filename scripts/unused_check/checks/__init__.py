"""
Check registry - exports all available checks.
"""

from .unused_files import check_unused_files
from .unused_imports import check_unused_imports

__all__ = [
    'check_unused_files',
    'check_unused_imports',
]
