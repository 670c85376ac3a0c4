"""Variable records held by the type registry.

The record does not carry its own name; the registry keys records by
name, and global and local variables share that single namespace.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class VariableScope(str, Enum):
    GLOBAL = "global"
    LOCAL = "local"


class VariableRecord(BaseModel):
    """Declared type and scope of one variable."""

    type: str
    scope: VariableScope = VariableScope.LOCAL
    declared: bool = True
