"""
Shared fixtures for unused_check tests.

Each test builds a small JS/TS source tree under tmp_path.
"""

from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Write {relative path: content} under tmp_path/src and return the root."""
    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / 'src'
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        return root.resolve()
    return _make


@pytest.fixture
def sample_tree(make_tree):
    """index -> a -> b, c never imported."""
    return make_tree({
        'index.ts': "import { a } from './a';\na();\n",
        'a.ts': "import { b } from './b';\nexport function a() { return b(); }\n",
        'b.ts': "export function b() { return 1; }\n",
        'c.ts': "export const c = 1;\n",
    })
