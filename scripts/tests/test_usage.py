"""
Usage Heuristic Tests

Per-binding decisions from raw text.
"""

import pytest

from unused_check.usage import is_namespace_used, is_name_used, is_module_token_used


def _after_first_line(content):
    return content.index('\n') + 1


class TestNamespaceUsage:

    def test_member_access_is_usage(self):
        assert is_namespace_used("import * as ns from './ns';\nns.run();\n", 'ns')

    def test_optional_chaining_is_usage(self):
        assert is_namespace_used("import * as ns from './ns';\nns?.run();\n", 'ns')

    def test_bare_reference_is_not_usage(self):
        assert not is_namespace_used("import * as ns from './ns';\nconsole.log(ns);\n", 'ns')

    def test_import_line_itself_ignored(self):
        assert not is_namespace_used("import * as ns from './ns.js';\n", 'ns')


class TestNameUsage:

    @pytest.mark.parametrize('usage', [
        'foo();',
        'foo.bar;',
        'foo = 2;',
        'const x = foo;',
        'const { a } = foo;',
        'let v: foo;',
        'class K extends foo {}',
        'return foo;',
        'await foo;',
        "app.use('/api', foo);",
        'router.get(foo);',
        "app.get('/x', cors(), foo);",
        'app.use(json(), foo);',
        'export { foo };',
    ])
    def test_usage_categories(self, usage):
        content = f"import {{ foo }} from './foo';\n{usage}\n"
        assert is_name_used(content, 'foo', _after_first_line(content))

    def test_plain_mention_is_not_usage(self):
        content = "import { foo } from './foo';\nconst s = 'foo';\n// foo\n"
        assert not is_name_used(content, 'foo', _after_first_line(content))

    def test_usage_before_import_not_counted(self):
        content = "foo();\nimport { foo } from './foo';\n"
        after = content.index("';") + 2
        assert not is_name_used(content, 'foo', after)

    def test_renamed_binding_checks_local_name(self):
        content = "import { foo as bar } from './foo';\nfoo();\n"
        after = _after_first_line(content)
        assert not is_name_used(content, 'bar', after)
        content = "import { foo as bar } from './foo';\nbar();\n"
        assert is_name_used(content, 'bar', after)

    def test_later_import_mentions_raise_the_bar(self):
        content = "import { foo } from './a';\nimport { foo as x } from './b';\n"
        assert not is_name_used(content, 'foo', _after_first_line(content))

    def test_identifier_boundary(self):
        content = "import { foo } from './foo';\nfoobar();\n$foo.x;\n"
        assert not is_name_used(content, 'foo', _after_first_line(content))

    def test_member_with_same_name_is_not_usage(self):
        content = "import { get } from './get';\nrouter.get('/x');\nobj.get = 1;\n"
        assert not is_name_used(content, 'get', _after_first_line(content))


class TestModuleTokenUsage:

    def test_lone_require_is_unused(self):
        content = "const a = require('./a');\n"
        span = (content.index('require'), content.index(')') + 1)
        assert not is_module_token_used(content, span)

    def test_other_require_counts(self):
        content = "const a = require('./a');\nconst b = require('./b');\n"
        span = (content.index('require'), content.index(')') + 1)
        assert is_module_token_used(content, span)
