"""Type-compatibility predicate.

Rules, first match wins:

1. either side is ``any``                      -> compatible
2. identical                                   -> compatible
3. both in {number, int, float, double}        -> compatible
4. both arrays   -> compare element types
5. both pointers -> compare target types
6. otherwise                                   -> incompatible

Every rule is symmetric, so ``target``/``source`` only name the roles.
"""

from __future__ import annotations

from lexitype.model.types import (
    ArrayTypeRef,
    NamedTypeRef,
    PointerTypeRef,
    TypeRef,
    parse_type,
)


ANY_TYPE = "any"

NUMERIC_TYPES = frozenset({"number", "int", "float", "double"})


def _as_ref(value: TypeRef | str) -> TypeRef:
    return parse_type(value) if isinstance(value, str) else value


def _compatible(target: TypeRef, source: TypeRef) -> bool:
    if isinstance(target, NamedTypeRef) and target.name == ANY_TYPE:
        return True
    if isinstance(source, NamedTypeRef) and source.name == ANY_TYPE:
        return True

    if target == source:
        return True

    if isinstance(target, NamedTypeRef) and isinstance(source, NamedTypeRef):
        return target.name in NUMERIC_TYPES and source.name in NUMERIC_TYPES

    if isinstance(target, ArrayTypeRef) and isinstance(source, ArrayTypeRef):
        return _compatible(target.element_type, source.element_type)

    if isinstance(target, PointerTypeRef) and isinstance(source, PointerTypeRef):
        return _compatible(target.target_type, source.target_type)

    return False


def are_types_compatible(target: TypeRef | str, source: TypeRef | str) -> bool:
    """Return True if a *source*-typed value may be used where *target* is expected."""
    return _compatible(_as_ref(target), _as_ref(source))
