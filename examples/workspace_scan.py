"""Workspace scan: declare, read and write typed variables.

A counter, a list of names and a C-style buffer pointer are declared,
then used by getters and setters, two of which disagree with the
declared types.  The scan reports both, then the state is exported and
reloaded into a fresh registry.
"""

import logging

from lexitype import BlockDescriptor, TypeRegistry, set_log_level, type_options

logging.basicConfig(level=logging.DEBUG)
set_log_level(logging.DEBUG)


blocks = [
    BlockDescriptor.from_fields(
        "typed_global_declaration", {"NAME": "counter", "TYPE": "number"}, id="g1"
    ),
    BlockDescriptor.from_fields(
        "typed_local_declaration_statement", {"VAR": "names", "TYPE": "string[]"}, id="l1"
    ),
    BlockDescriptor.from_fields(
        "typed_local_declaration_statement", {"VAR": "buf", "TYPE": "char*"}, id="l2"
    ),
    # OK: int fits a number
    BlockDescriptor.from_fields("typed_lexical_variable_set", {"VAR": "counter"}, type="int", id="s1"),
    # Wrong: string into number
    BlockDescriptor.from_fields("typed_lexical_variable_set", {"VAR": "counter"}, type="string", id="s2"),
    # Wrong: reading string[] as number[]
    BlockDescriptor.from_fields("typed_lexical_variable_get", {"VAR": "names"}, type="number[]", id="r1"),
    # OK: pointer to same base
    BlockDescriptor.from_fields("typed_lexical_variable_get", {"VAR": "buf"}, type="char*", id="r2"),
    # Not a typed block; ignored
    BlockDescriptor(kind="controls_if", id="c1"),
]


if __name__ == "__main__":
    registry = TypeRegistry()
    for diag in registry.check_type_errors(blocks):
        print(f"[{diag.severity.value}] {diag.block_id}: {diag.message}")

    print()
    print("C types:", ", ".join(value for _, value in type_options("c")))

    exported = registry.export_type_info()
    print()
    print(exported)

    restored = TypeRegistry()
    restored.import_type_info(exported)
    assert restored.get_variable_type_summary() == registry.get_variable_type_summary()
