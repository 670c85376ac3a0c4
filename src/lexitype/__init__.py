"""lexitype: typed-variable registry for block-programming editors.

Public API::

    from lexitype import BlockDescriptor, TypeRegistry

    registry = TypeRegistry()
    registry.check_type_errors([
        BlockDescriptor(kind="typed_local_declaration_statement", name="n", type="number"),
        BlockDescriptor(kind="typed_lexical_variable_set", name="n", type="string"),
    ])
"""

from ._logger import set_log_level, set_logger
from .model.blocks import BlockDescriptor, BlockKind, BlockLike
from .model.diagnostics import Diagnostic, Severity
from .model.types import (
    ArrayTypeRef,
    NamedTypeRef,
    PointerTypeRef,
    TypeRef,
    format_type,
    parse_type,
)
from .model.variables import VariableRecord, VariableScope
from .model.vocabulary import (
    TargetLanguage,
    base_type,
    has_specific_type,
    is_array_type,
    is_pointer_type,
    type_options,
)
from .registry import TypeRegistry, TypeState, are_types_compatible

__all__ = [
    "ArrayTypeRef",
    "BlockDescriptor",
    "BlockKind",
    "BlockLike",
    "Diagnostic",
    "NamedTypeRef",
    "PointerTypeRef",
    "Severity",
    "TargetLanguage",
    "TypeRef",
    "TypeRegistry",
    "TypeState",
    "VariableRecord",
    "VariableScope",
    "are_types_compatible",
    "base_type",
    "format_type",
    "has_specific_type",
    "is_array_type",
    "is_pointer_type",
    "parse_type",
    "set_log_level",
    "set_logger",
    "type_options",
]
