"""Tests for block descriptors and the editor field adapter."""

from lexitype.model.blocks import BlockDescriptor, BlockKind, BlockLike


class TestBlockKind:
    def test_editor_tags(self):
        assert BlockKind.GLOBAL_DECLARATION.value == "typed_global_declaration"
        assert BlockKind.LOCAL_DECLARATION.value == "typed_local_declaration_statement"
        assert BlockKind.VARIABLE_GET.value == "typed_lexical_variable_get"
        assert BlockKind.VARIABLE_SET.value == "typed_lexical_variable_set"

    def test_lookup(self):
        assert BlockKind.lookup("typed_lexical_variable_get") is BlockKind.VARIABLE_GET
        assert BlockKind.lookup("controls_if") is None

    def test_is_declaration(self):
        assert BlockKind.GLOBAL_DECLARATION.is_declaration
        assert BlockKind.LOCAL_DECLARATION.is_declaration
        assert not BlockKind.VARIABLE_GET.is_declaration
        assert not BlockKind.VARIABLE_SET.is_declaration


class TestBlockDescriptor:
    def test_defaults(self):
        b = BlockDescriptor(kind="typed_lexical_variable_get", name="x")
        assert b.type == "any"
        assert b.id is None

    def test_satisfies_protocol(self):
        assert isinstance(BlockDescriptor(kind="anything"), BlockLike)


class TestFromFields:
    def test_global_declaration_uses_name_field(self):
        b = BlockDescriptor.from_fields(
            "typed_global_declaration", {"NAME": "counter", "TYPE": "number"}, id="b1"
        )
        assert (b.name, b.type, b.id) == ("counter", "number", "b1")

    def test_local_declaration_uses_var_field(self):
        b = BlockDescriptor.from_fields(
            "typed_local_declaration_statement", {"VAR": "name", "TYPE": "string"}
        )
        assert (b.name, b.type) == ("name", "string")

    def test_declaration_without_type_field(self):
        b = BlockDescriptor.from_fields("typed_local_declaration_statement", {"VAR": "v"})
        assert b.type == "any"

    def test_getter_type_from_argument(self):
        b = BlockDescriptor.from_fields(
            "typed_lexical_variable_get", {"VAR": "counter", "TYPE": "ignored"}, type="int"
        )
        assert (b.name, b.type) == ("counter", "int")

    def test_setter_type_defaults_to_any(self):
        b = BlockDescriptor.from_fields("typed_lexical_variable_set", {"VAR": "counter"})
        assert b.type == "any"

    def test_missing_name(self):
        b = BlockDescriptor.from_fields("typed_global_declaration", {"VAR": "wrong_field"})
        assert b.name is None

    def test_scan_with_adapted_blocks(self, registry):
        blocks = [
            BlockDescriptor.from_fields(
                "typed_local_declaration_statement", {"VAR": "counter", "TYPE": "number"}
            ),
            BlockDescriptor.from_fields(
                "typed_lexical_variable_set", {"VAR": "counter"}, type="string"
            ),
        ]
        errors = registry.check_type_errors(blocks)
        assert len(errors) == 1
        assert "Type mismatch" in errors[0].message
