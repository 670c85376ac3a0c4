"""Block descriptors consumed by a type-check scan.

The registry knows nothing about the editor's block classes.  A scan
only needs each block to expose ``kind``, ``name``, ``type`` and ``id``
(the ``BlockLike`` protocol); ``BlockDescriptor`` is the stock
implementation, and ``BlockDescriptor.from_fields`` adapts the editor's
raw field values.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Protocol, runtime_checkable

from pydantic import BaseModel


class BlockKind(str, Enum):
    """Block type tags the registry reacts to.  Anything else is skipped."""

    GLOBAL_DECLARATION = "typed_global_declaration"
    LOCAL_DECLARATION = "typed_local_declaration_statement"
    VARIABLE_GET = "typed_lexical_variable_get"
    VARIABLE_SET = "typed_lexical_variable_set"

    @classmethod
    def lookup(cls, tag: str) -> BlockKind | None:
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def is_declaration(self) -> bool:
        return self in (BlockKind.GLOBAL_DECLARATION, BlockKind.LOCAL_DECLARATION)


@runtime_checkable
class BlockLike(Protocol):
    """Minimal shape of a block as seen by the registry."""

    kind: str
    id: str | None
    name: str | None
    type: str | None


class BlockDescriptor(BaseModel):
    """Plain-data description of one editor block.

    For declarations ``name``/``type`` are the declared name and type;
    for getters and setters they are the referenced variable and the
    type expected at (or assigned from) the use site.
    """

    kind: str
    id: str | None = None
    name: str | None = None
    type: str = "any"

    @classmethod
    def from_fields(
        cls,
        kind: str,
        fields: Mapping[str, str],
        *,
        id: str | None = None,
        type: str | None = None,
    ) -> BlockDescriptor:
        """Build a descriptor from a block's field values.

        Global declarations name their variable in the ``NAME`` field,
        every other typed block in ``VAR``.  Declarations carry their type
        in the ``TYPE`` field; getters and setters keep it on the variable
        field itself, so it is passed explicitly via *type*.
        """
        name_field = "NAME" if kind == BlockKind.GLOBAL_DECLARATION.value else "VAR"
        resolved = BlockKind.lookup(kind)
        if type is None:
            if resolved is not None and resolved.is_declaration:
                type = fields.get("TYPE", "any")
            else:
                type = "any"
        return cls(kind=kind, id=id, name=fields.get(name_field), type=type)
