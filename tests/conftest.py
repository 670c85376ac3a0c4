"""Shared test helpers for the lexitype test suite."""

import pytest

from lexitype.model.blocks import BlockDescriptor, BlockKind
from lexitype.registry import TypeRegistry


@pytest.fixture
def registry():
    return TypeRegistry()


def local_decl(name, type, id=None):
    """Shorthand for a local declaration block."""
    return BlockDescriptor(kind=BlockKind.LOCAL_DECLARATION.value, id=id, name=name, type=type)


def global_decl(name, type, id=None):
    """Shorthand for a global declaration block."""
    return BlockDescriptor(kind=BlockKind.GLOBAL_DECLARATION.value, id=id, name=name, type=type)


def getter(name, type, id=None):
    return BlockDescriptor(kind=BlockKind.VARIABLE_GET.value, id=id, name=name, type=type)


def setter(name, type, id=None):
    return BlockDescriptor(kind=BlockKind.VARIABLE_SET.value, id=id, name=name, type=type)
