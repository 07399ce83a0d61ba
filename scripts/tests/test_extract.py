"""
Extraction Tests

Import edges and export names pulled from raw JS/TS text.
"""

from unused_check.extract import extract_imports, extract_exports
from unused_check.models import NAMESPACE, DEFAULT, NAMED, REQUIRE, DYNAMIC

TARGETS = ['ns', 'def', 'named', 'combo', 'side', 'req', 'lazy', 're']

MAIN = """import * as ns from './ns';
import Def from './def';
import { a, b as c } from './named';
import D, { e } from './combo';
import './side';
const r = require('./req');
const lazy = import('./lazy');
import React from 'react';
export { x } from './re';
"""


def _tree(make_tree, main=MAIN):
    files = {f'{t}.ts': 'export const x = 1;\n' for t in TARGETS}
    files['main.ts'] = main
    return make_tree(files)


def _kinds(edge):
    return [(b.kind, b.local_name, b.original_name) for b in edge.bindings]


class TestExtractImports:

    def test_edges_in_source_order(self, make_tree):
        root = _tree(make_tree)
        edges = extract_imports(MAIN, root / 'main.ts', root)
        assert [e.target.stem for e in edges] == TARGETS
        assert [e.line for e in edges] == [1, 2, 3, 4, 5, 6, 7, 9]

    def test_binding_kinds(self, make_tree):
        root = _tree(make_tree)
        edges = {e.target.stem: e for e in extract_imports(MAIN, root / 'main.ts', root)}
        assert _kinds(edges['ns']) == [(NAMESPACE, 'ns', 'ns')]
        assert _kinds(edges['def']) == [(DEFAULT, 'Def', 'Def')]
        assert _kinds(edges['named']) == [(NAMED, 'a', 'a'), (NAMED, 'c', 'b')]
        assert _kinds(edges['combo']) == [(DEFAULT, 'D', 'D'), (NAMED, 'e', 'e')]
        assert _kinds(edges['req']) == [(REQUIRE, 'default', 'default')]
        assert _kinds(edges['lazy']) == [(DYNAMIC, 'default', 'default')]

    def test_side_effect_and_reexport_have_no_bindings(self, make_tree):
        root = _tree(make_tree)
        edges = {e.target.stem: e for e in extract_imports(MAIN, root / 'main.ts', root)}
        assert edges['side'].bindings == ()
        assert edges['re'].bindings == ()

    def test_multiline_named_list(self, make_tree):
        content = "import {\n  one,\n  two as three,\n} from './multi';\n"
        root = make_tree({'multi.ts': '', 'main.ts': content})
        [edge] = extract_imports(content, root / 'main.ts', root)
        assert _kinds(edge) == [(NAMED, 'one', 'one'), (NAMED, 'three', 'two')]
        assert [b.line for b in edge.bindings] == [2, 3]

    def test_type_imports(self, make_tree):
        content = "import type { Props } from './types';\nimport { type Row, load } from './types';\n"
        root = make_tree({'types.ts': '', 'main.ts': content})
        edges = extract_imports(content, root / 'main.ts', root)
        assert _kinds(edges[0]) == [(NAMED, 'Props', 'Props')]
        assert _kinds(edges[1]) == [(NAMED, 'Row', 'Row'), (NAMED, 'load', 'load')]

    def test_external_and_unresolved_dropped(self, make_tree):
        content = (
            "import x from 'lodash';\n"
            "import y from './missing';\n"
            "const z = import('chalk');\n"
            "import w from '../outside';\n"
        )
        root = make_tree({'main.ts': content})
        (root.parent / 'outside.ts').write_text('export default 1;\n')
        assert extract_imports(content, root / 'main.ts', root) == []

    def test_reexport_without_space(self, make_tree):
        content = "export{ x } from './re';\nexport* from './all';\n"
        root = make_tree({'re.ts': '', 'all.ts': '', 'main.ts': content})
        edges = extract_imports(content, root / 'main.ts', root)
        assert [e.target.stem for e in edges] == ['re', 'all']

    def test_span_covers_statement(self, make_tree):
        content = "// header\nimport Def from './def';\n"
        root = make_tree({'def.ts': '', 'main.ts': content})
        [edge] = extract_imports(content, root / 'main.ts', root)
        start, end = edge.span
        assert content[start:end] == "import Def from './def'"


class TestExtractExports:

    def test_declarations_lists_and_default(self):
        content = (
            "export const A = 1;\n"
            "export function fn() {}\n"
            "export async function af() {}\n"
            "export class K {}\n"
            "export interface I {}\n"
            "export type T = string;\n"
            "export enum E {}\n"
            "const local = 1;\n"
            "export { local as renamed, other };\n"
            "export default K;\n"
        )
        assert extract_exports(content) == {
            'A', 'fn', 'af', 'K', 'I', 'T', 'E', 'renamed', 'other', 'default',
        }

    def test_renamed_export_uses_exported_name(self):
        assert extract_exports("const a = 1;\nexport { a as b };\n") == {'b'}

    def test_export_list_without_space(self):
        assert extract_exports("const a = 1;\nexport{ a };\n") == {'a'}

    def test_default_declaration_keeps_its_name(self):
        assert extract_exports("export default class Foo {}\n") == {'Foo', 'default'}

    def test_default_only(self):
        assert extract_exports("export default function () {}\n") == {'default'}

    def test_no_exports(self):
        assert extract_exports("console.log('side effect');\n") == frozenset()

    def test_deduplicated(self):
        content = "export const a = 1;\nexport { a };\n"
        assert extract_exports(content) == {'a'}
