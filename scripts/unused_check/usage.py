"""
Usage heuristic for imported bindings.

Decides from raw text whether an imported name is referenced after its
import statement. Approximate by nature: unrelated text can match a name,
and forms outside the pattern list (spread, computed access) are missed.
"""

import re
from typing import List

from .config import FRAMEWORK_METHODS
from .extract import IMPORT_FROM, IMPORT_SIDE_EFFECT
from .models import ImportEdge, ImportedBinding, NAMESPACE, DEFAULT, NAMED, REQUIRE, DYNAMIC

IMPORT_STATEMENTS = (IMPORT_FROM, IMPORT_SIDE_EFFECT)
MODULE_TOKENS = re.compile(r'\b(?:require|import)\b')


def usage_patterns(name: str) -> List[re.Pattern]:
    """Usage categories for a default/named binding."""
    n = re.escape(name)
    # Identifiers may contain $, so \b alone is not a safe boundary; a leading
    # dot means a member of something else
    word = rf'(?<![\w$.])(?P<name>{n})(?![\w$])'
    methods = '|'.join(FRAMEWORK_METHODS)
    return [
        re.compile(rf'{word}\s*\('),                                          # call
        re.compile(rf'{word}\s*\??\.(?!\.)'),                                 # property access
        re.compile(rf'{word}\s*=(?![=>])'),                                   # assignment target
        re.compile(rf'(?<![=!<>])=\s*{word}'),                                # assignment source
        re.compile(rf'[}}\]]\s*=\s*{word}'),                                  # destructuring
        re.compile(rf'(?:[:<|&]|\b(?:extends|implements|as|typeof|keyof))\s*{word}'),  # type position
        re.compile(rf'\breturn\s+{word}'),                                    # return
        re.compile(rf'\bawait\s+{word}'),                                     # await
        re.compile(rf'\.(?:{methods})\s*\((?:[^()]|\([^()]*\))*?{word}'),     # framework argument
        re.compile(rf'\bexport(?:\s+default\s+|\s*\{{[^}}]*){word}'),         # re-export
    ]


def blank_spans(content: str, spans) -> str:
    """Replace spans with spaces, keeping newlines so offsets and lines hold."""
    chars = list(content)
    for start, end in spans:
        for i in range(start, end):
            if chars[i] != '\n':
                chars[i] = ' '
    return ''.join(chars)


def import_statement_spans(content: str):
    return [m.span() for pattern in IMPORT_STATEMENTS for m in pattern.finditer(content)]


def is_namespace_used(content: str, name: str) -> bool:
    """Namespace is used iff `name.` appears outside import statements."""
    text = blank_spans(content, import_statement_spans(content))
    return re.search(rf'(?<![\w$.]){re.escape(name)}\s*\??\.(?!\.)', text) is not None


def is_name_used(content: str, name: str, after: int) -> bool:
    """Default/named binding is used iff usage occurrences after its import
    statement outnumber later import statements that mention it."""
    tail = content[after:]

    # One occurrence may match several categories; count it once
    positions = set()
    for pattern in usage_patterns(name):
        positions.update(m.start('name') for m in pattern.finditer(tail))

    word = re.compile(rf'(?<![\w$.]){re.escape(name)}(?![\w$])')
    import_mentions = sum(
        1 for m in IMPORT_FROM.finditer(tail) if word.search(m.group('clause'))
    )
    return len(positions) > import_mentions


def is_module_token_used(content: str, span) -> bool:
    """Coarse check for require()/import(): any other require/import token."""
    text = blank_spans(content, [span])
    return MODULE_TOKENS.search(text) is not None


def is_binding_used(content: str, edge: ImportEdge, binding: ImportedBinding) -> bool:
    """Dispatch the usage check by binding kind."""
    if binding.kind == NAMESPACE:
        return is_namespace_used(content, binding.local_name)
    if binding.kind in (DEFAULT, NAMED):
        return is_name_used(content, binding.local_name, edge.span[1])
    if binding.kind in (REQUIRE, DYNAMIC):
        return is_module_token_used(content, edge.span)
    raise ValueError(f"Unknown binding kind: {binding.kind}")
