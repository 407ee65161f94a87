"""Mapping of native Objective-C types to Ruby binding type names."""

from __future__ import annotations

import re
from collections.abc import Sequence

POINTER = "Pointer"

_POINTER_STAR_RE = re.compile(r"\s*\*$")
_CONST_RE = re.compile(r"^const\s+")
_OBJECT_RE = re.compile(r"^id(?:\s*<\s*\w+\s*>)?$")
_INTEGER_PREFIX_RE = re.compile(r"^u?int(?:\d+_t)?")

_TYPE_TABLE: dict[str, str] = {
    "void": "nil",
    "SEL": "Symbol",
    "bool": "Boolean",
    "BOOL": "Boolean",
    "float": "Float",
    "double": "Float",
    "CGFloat": "Float",
    "NSTimeInterval": "Float",
    "char": "Integer",
    "unichar": "Integer",
    "short": "Integer",
    "long": "Integer",
    "long long": "Integer",
    "unsigned": "Integer",
    "unsigned char": "Integer",
    "unsigned short": "Integer",
    "unsigned int": "Integer",
    "unsigned long": "Integer",
    "unsigned long long": "Integer",
    "NSInteger": "Integer",
    "NSUInteger": "Integer",
    "NSString": "String",
    "NSMutableString": "String",
    "NSArray": "Array",
    "NSMutableArray": "Array",
    "NSDictionary": "Hash",
    "NSMutableDictionary": "Hash",
}


def normalize_type(raw: str | Sequence[str] | None) -> str:
    """Return the binding type name for a declared native type.

    A list or tuple (as produced by multi-group regex scans) contributes its
    first element only. Unknown types come back trimmed and without their
    pointer star, so 'NSView *' becomes 'NSView'.
    """
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else ""
    token = str(raw or "").strip()
    token = _POINTER_STAR_RE.sub("", token, count=1)

    if token.endswith("*"):
        # Double indirection has no scalar equivalent.
        return POINTER

    unqualified = _CONST_RE.sub("", token)
    if _OBJECT_RE.match(unqualified):
        return "Object"
    if unqualified in _TYPE_TABLE:
        return _TYPE_TABLE[unqualified]
    if _INTEGER_PREFIX_RE.match(unqualified):
        return "Integer"
    return token
