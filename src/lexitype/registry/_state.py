"""Serialized form of a TypeRegistry."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_serializer
from pydantic_core import to_jsonable_python

from lexitype import _logger
from lexitype.model.diagnostics import Diagnostic
from lexitype.model.variables import VariableRecord


def _stringify(value: Any) -> str:
    _logger.logger.warning(
        f"Block type info of type {type(value).__name__} is not JSON-serializable; "
        f"exporting it as a string"
    )
    return str(value)


class TypeState(BaseModel):
    """Export document: variables, block metadata and the last diagnostics.

    Every field defaults to empty, so a partial document imports cleanly.

    Block metadata goes through JSON as-is, so only JSON-shaped values
    survive a round trip unchanged: tuples come back as lists, and values
    JSON cannot represent at all are exported as their ``str()``.
    """

    variable_types: dict[str, VariableRecord] = {}
    block_types: dict[str, Any] = {}
    type_errors: list[Diagnostic] = []

    @field_serializer("block_types", when_used="json")
    def _serialize_block_types(self, block_types: dict[str, Any]) -> Any:
        return to_jsonable_python(block_types, fallback=_stringify)
