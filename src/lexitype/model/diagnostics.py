"""Diagnostics produced by a type-check scan."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Diagnostic(BaseModel):
    """A single finding from a scan.

    ``source_block`` is whatever object the editor handed in; it stays in
    memory only.  ``block_id`` is the serializable reference to it.
    """

    source_block: Any = Field(default=None, exclude=True, repr=False)
    block_id: str | None = None
    message: str
    severity: Severity = Severity.ERROR
