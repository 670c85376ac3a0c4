"""Type references for typed block variables.

Type identifiers are an open vocabulary of plain strings ("number",
"string[]", "int*", "Promise<any>"...).  Structure is carried only by
suffixes:

- ``T[]`` : array of T
- ``T*``  : pointer to T

``parse_type`` turns an identifier into a TypeRef tree by peeling the
outermost suffix first; ``format_type`` is its exact inverse, so
``format_type(parse_type(s)) == s`` for every string ``s``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


ARRAY_SUFFIX = "[]"
POINTER_SUFFIX = "*"


# ---------------------------------------------------------------------------
# Type References
# ---------------------------------------------------------------------------

class NamedTypeRef(BaseModel):
    """Reference to a named type ("number", "string", "MyStruct", ...)."""

    kind: Literal["named"] = "named"
    name: str


class ArrayTypeRef(BaseModel):
    """Array type: ``element_type[]``."""

    kind: Literal["array"] = "array"
    element_type: TypeRef


class PointerTypeRef(BaseModel):
    """Pointer type: ``target_type*``."""

    kind: Literal["pointer"] = "pointer"
    target_type: TypeRef


TypeRef = Annotated[
    Union[NamedTypeRef, ArrayTypeRef, PointerTypeRef],
    Field(discriminator="kind"),
]


ArrayTypeRef.model_rebuild()
PointerTypeRef.model_rebuild()


# ---------------------------------------------------------------------------
# Parsing / formatting
# ---------------------------------------------------------------------------

def parse_type(text: str) -> TypeRef:
    """Parse a type identifier into a TypeRef tree.

    Never fails: anything without a recognised suffix is a NamedTypeRef,
    including the empty string.
    """
    if text.endswith(ARRAY_SUFFIX):
        return ArrayTypeRef(element_type=parse_type(text[: -len(ARRAY_SUFFIX)]))
    if text.endswith(POINTER_SUFFIX):
        return PointerTypeRef(target_type=parse_type(text[: -len(POINTER_SUFFIX)]))
    return NamedTypeRef(name=text)


def format_type(ref: TypeRef) -> str:
    """Render a TypeRef back to its identifier string."""
    if isinstance(ref, ArrayTypeRef):
        return format_type(ref.element_type) + ARRAY_SUFFIX
    if isinstance(ref, PointerTypeRef):
        return format_type(ref.target_type) + POINTER_SUFFIX
    return ref.name
