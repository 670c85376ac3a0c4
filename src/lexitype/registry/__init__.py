"""lexitype registry: type tracking and checking for block variables.

Entry point::

    from lexitype.registry import TypeRegistry

    registry = TypeRegistry()
    errors = registry.check_type_errors(blocks)
    for d in errors:
        print(d.severity.value, d.message)
"""

from ._compat import ANY_TYPE, NUMERIC_TYPES, are_types_compatible
from ._registry import TypeRegistry
from ._state import TypeState

__all__ = [
    "ANY_TYPE",
    "NUMERIC_TYPES",
    "TypeRegistry",
    "TypeState",
    "are_types_compatible",
]
