"""Per-language type vocabularies offered by the editor's type picker.

The registry itself accepts any identifier; these lists only drive what
the editor suggests, plus a few suffix helpers used by type fields.
"""

from __future__ import annotations

from enum import Enum

from .types import (
    ARRAY_SUFFIX,
    POINTER_SUFFIX,
    ArrayTypeRef,
    PointerTypeRef,
    format_type,
    parse_type,
)


class TargetLanguage(str, Enum):
    C = "c"
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"


# (label, value) pairs, in menu order.

COMMON_TYPES: list[tuple[str, str]] = [
    ("Any", "any"),
    ("Number", "number"),
    ("String", "string"),
    ("Boolean", "boolean"),
    ("Array", "array"),
    ("Object", "object"),
    ("Function", "function"),
    ("Void", "void"),
]

C_TYPES: list[tuple[str, str]] = [
    ("int", "int"),
    ("float", "float"),
    ("double", "double"),
    ("char", "char"),
    ("char*", "char*"),
    ("void", "void"),
    ("bool", "bool"),
    ("int*", "int*"),
    ("float*", "float*"),
]

JAVASCRIPT_TYPES: list[tuple[str, str]] = [
    *COMMON_TYPES,
    ("Number[]", "number[]"),
    ("String[]", "string[]"),
    ("Boolean[]", "boolean[]"),
]

TYPESCRIPT_TYPES: list[tuple[str, str]] = [
    *JAVASCRIPT_TYPES,
    ("Promise<any>", "Promise<any>"),
    ("Promise<number>", "Promise<number>"),
    ("Promise<string>", "Promise<string>"),
    ("Promise<boolean>", "Promise<boolean>"),
]

_OPTIONS: dict[TargetLanguage, list[tuple[str, str]]] = {
    TargetLanguage.C: C_TYPES,
    TargetLanguage.TYPESCRIPT: TYPESCRIPT_TYPES,
    TargetLanguage.JAVASCRIPT: JAVASCRIPT_TYPES,
}


def resolve_language(language: TargetLanguage | str) -> TargetLanguage:
    """Normalise a language name; unknown names fall back to TypeScript."""
    if isinstance(language, TargetLanguage):
        return language
    try:
        return TargetLanguage(language.lower())
    except ValueError:
        return TargetLanguage.TYPESCRIPT


def type_options(language: TargetLanguage | str = TargetLanguage.TYPESCRIPT) -> list[tuple[str, str]]:
    """Return a fresh list of (label, value) type choices for *language*."""
    return list(_OPTIONS[resolve_language(language)])


# ---------------------------------------------------------------------------
# Suffix helpers
# ---------------------------------------------------------------------------

def is_array_type(type_name: str) -> bool:
    return type_name.endswith(ARRAY_SUFFIX) or type_name == "array"


def is_pointer_type(type_name: str) -> bool:
    return type_name.endswith(POINTER_SUFFIX)


def base_type(type_name: str) -> str:
    """Strip one array or pointer suffix: ``"int[]"`` -> ``"int"``."""
    ref = parse_type(type_name)
    if isinstance(ref, ArrayTypeRef):
        return format_type(ref.element_type)
    if isinstance(ref, PointerTypeRef):
        return format_type(ref.target_type)
    return type_name


def has_specific_type(type_name: str | None) -> bool:
    """True unless the type is missing, empty, or the ``any`` wildcard."""
    return bool(type_name) and type_name != "any"
