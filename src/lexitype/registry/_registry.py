"""TypeRegistry: variable types, block metadata and scan diagnostics."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from lexitype import _logger
from lexitype.model.blocks import BlockKind, BlockLike
from lexitype.model.diagnostics import Diagnostic, Severity
from lexitype.model.types import TypeRef
from lexitype.model.variables import VariableRecord, VariableScope

from ._compat import ANY_TYPE, are_types_compatible
from ._state import TypeState


class TypeRegistry:
    """Tracks typed variables and checks reads/writes against them.

    One instance per workspace, owned and driven by the caller.  Not
    thread-safe.

    Variables live in a single namespace regardless of scope: a local
    cannot shadow a global of the same name.
    """

    def __init__(self) -> None:
        self._variables: dict[str, VariableRecord] = {}
        self._block_types: dict[str, Any] = {}
        self._errors: list[Diagnostic] = []

    # -- Variables ----------------------------------------------------------

    def register_variable(
        self,
        name: str,
        type: str,
        scope: VariableScope | str = VariableScope.LOCAL,
    ) -> None:
        """Insert or overwrite the record for *name*."""
        if name in self._variables:
            _logger.logger.debug(f"Overwriting type record for variable '{name}'")
        self._variables[name] = VariableRecord(type=type, scope=VariableScope(scope))

    def get_variable_type(self, name: str) -> str | None:
        record = self._variables.get(name)
        return record.type if record is not None else None

    def is_variable_declared(self, name: str) -> bool:
        return name in self._variables

    def get_variable_type_summary(self) -> dict[str, VariableRecord]:
        """Snapshot of name -> record.  Later registrations are not reflected."""
        return dict(self._variables)

    # -- Block metadata -----------------------------------------------------

    def register_block_type(self, block_id: str, info: Any) -> None:
        self._block_types[block_id] = info

    def get_block_type(self, block_id: str) -> Any | None:
        return self._block_types.get(block_id)

    # -- Compatibility ------------------------------------------------------

    def are_types_compatible(self, target: TypeRef | str, source: TypeRef | str) -> bool:
        return are_types_compatible(target, source)

    # -- Scanning -----------------------------------------------------------

    def check_type_errors(self, blocks: Iterable[BlockLike]) -> list[Diagnostic]:
        """Scan *blocks* in order and return the rebuilt diagnostics list.

        Declarations register as they are met, so a getter or setter that
        precedes its declaration is not checked.  Variable records from
        earlier scans are kept; call ``reset()`` to start clean.
        """
        self._errors = []
        count = 0
        for block in blocks:
            self._check_block(block)
            count += 1
        _logger.logger.debug(
            f"Type scan: {count} blocks, {len(self._variables)} variables, "
            f"{len(self._errors)} diagnostics"
        )
        return self._errors

    def _check_block(self, block: BlockLike) -> None:
        kind = BlockKind.lookup(block.kind)
        if kind is None:
            return

        name = block.name
        if name is None:
            return

        # Editors report an unset type field as None; treat it as the wildcard.
        block_type = block.type if block.type is not None else ANY_TYPE

        if kind.is_declaration:
            if self.is_variable_declared(name):
                self._report(block, f"Variable {name} is already declared")
            else:
                scope = (
                    VariableScope.GLOBAL
                    if kind == BlockKind.GLOBAL_DECLARATION
                    else VariableScope.LOCAL
                )
                self.register_variable(name, block_type, scope)
            return

        actual = self.get_variable_type(name)
        if not actual:
            return

        if kind == BlockKind.VARIABLE_GET:
            if not are_types_compatible(block_type, actual):
                self._report(
                    block,
                    f"Type mismatch: expected {block_type}, got {actual} "
                    f"for variable {name}",
                )
        elif kind == BlockKind.VARIABLE_SET:
            if not are_types_compatible(actual, block_type):
                self._report(
                    block,
                    f"Type mismatch: cannot assign {block_type} to variable "
                    f"{name} of type {actual}",
                )

    def _report(self, block: BlockLike, message: str, severity: Severity = Severity.ERROR) -> None:
        self._errors.append(
            Diagnostic(
                source_block=block,
                block_id=getattr(block, "id", None),
                message=message,
                severity=severity,
            )
        )

    def get_type_errors(self) -> list[Diagnostic]:
        return self._errors

    def clear_type_errors(self) -> None:
        self._errors = []

    # -- Lifecycle ----------------------------------------------------------

    def reset(self) -> None:
        """Drop all variables, block metadata and diagnostics."""
        self._variables.clear()
        self._block_types.clear()
        self._errors = []

    # -- Serialization ------------------------------------------------------

    def to_state(self) -> TypeState:
        return TypeState(
            variable_types=dict(self._variables),
            block_types=dict(self._block_types),
            type_errors=list(self._errors),
        )

    def export_type_info(self, *, indent: int | None = 2) -> str:
        """Serialize all type information to a JSON document."""
        return self.to_state().model_dump_json(indent=indent)

    def import_type_info(self, payload: str | bytes) -> bool:
        """Replace the registry contents with an exported JSON document.

        Missing top-level fields import as empty.  On malformed input the
        failure is logged, nothing is changed, and False is returned.
        """
        try:
            state = TypeState.model_validate_json(payload)
        except ValidationError as exc:
            _logger.logger.error(f"Failed to import type information: {exc}")
            return False

        self._variables = dict(state.variable_types)
        self._block_types = dict(state.block_types)
        self._errors = list(state.type_errors)
        return True
