"""Unit tests for the type model and primitive type table."""

import dataclasses
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from json2struct.model.types import (
    CustomType,
    FieldSlot,
    NameRegistry,
    PrimitiveKind,
    RecordType,
    custom_type_name,
    is_custom,
    is_primitive,
)
from json2struct.model.type_table import (
    array_wrapper,
    map_primitive,
    optional_wrapper,
    render_field_type,
)


def _slot(key, field_type, is_array=False, is_optional=False):
    return FieldSlot(key, key, field_type, is_array=is_array, is_optional=is_optional)


class TestFieldType:
    """Test FieldType helpers."""

    def test_is_primitive(self):
        assert is_primitive(PrimitiveKind.STRING)
        assert is_primitive(PrimitiveKind.INTEGER)
        assert is_primitive(PrimitiveKind.NUMBER)
        assert is_primitive(PrimitiveKind.BOOLEAN)
        assert not is_primitive(PrimitiveKind.ANY)
        assert not is_primitive(CustomType("User"))

    def test_custom(self):
        assert is_custom(CustomType("User"))
        assert not is_custom(PrimitiveKind.STRING)
        assert custom_type_name(CustomType("User")) == "User"
        assert custom_type_name(PrimitiveKind.ANY) is None

    def test_display(self):
        assert str(PrimitiveKind.NUMBER) == "Number"
        assert str(CustomType("Address")) == "Address"


class TestRecordType:
    """Test RecordType tree helpers."""

    @pytest.fixture
    def tree(self):
        street = RecordType("Street", (_slot("name", PrimitiveKind.STRING),))
        address = RecordType(
            "Address",
            (_slot("street", CustomType("Street")),),
            (street,),
        )
        company = RecordType("Company", (_slot("title", PrimitiveKind.STRING),))
        return RecordType(
            "User",
            (
                _slot("address", CustomType("Address")),
                _slot("backup", CustomType("Address")),
                _slot("company", CustomType("Company")),
                _slot("id", PrimitiveKind.INTEGER),
            ),
            (address, company),
        )

    def test_referenced_types_unique(self, tree):
        assert tree.referenced_types() == ["Address", "Company"]

    def test_iter_records_parents_first(self, tree):
        assert [r.name for r in tree.iter_records()] == ["User", "Address", "Street", "Company"]

    def test_find(self, tree):
        assert tree.find("Street").fields[0].source_key == "name"
        assert tree.find("Missing") is None

    def test_field_lookup(self, tree):
        assert tree.field("id").type is PrimitiveKind.INTEGER
        assert tree.field("nope") is None

    def test_no_unresolved_references(self, tree):
        assert tree.unresolved_references() == []

    def test_unresolved_references_detected(self):
        record = RecordType("Root", (_slot("x", CustomType("Ghost")),))
        assert record.unresolved_references() == ["Ghost"]

    def test_is_empty(self, tree):
        assert not tree.is_empty()
        assert RecordType("Empty").is_empty()

    def test_frozen(self, tree):
        with pytest.raises(dataclasses.FrozenInstanceError):
            tree.name = "Other"
        with pytest.raises(dataclasses.FrozenInstanceError):
            tree.fields[0].is_optional = True

    def test_to_dict(self, tree):
        data = tree.to_dict()
        assert data["name"] == "User"
        assert data["fields"][0] == {
            "source_key": "address",
            "display_name": "address",
            "type": "Address",
            "is_custom": True,
            "is_array": False,
            "is_optional": False,
        }
        assert [r["name"] for r in data["nested_records"]] == ["Address", "Company"]
        assert "annotation" not in data


class TestNameRegistry:
    """Test collision-free name allocation."""

    def test_suffixes(self):
        registry = NameRegistry()
        assert registry.allocate("Item") == "Item"
        assert registry.allocate("Item") == "Item2"
        assert registry.allocate("Item") == "Item3"
        assert len(registry) == 3
        assert "Item2" in registry

    def test_suffix_skips_taken_names(self):
        registry = NameRegistry()
        registry.allocate("Item2")
        registry.allocate("Item")
        assert registry.allocate("Item") == "Item3"

    def test_registries_are_independent(self):
        first, second = NameRegistry(), NameRegistry()
        first.allocate("Root")
        assert second.allocate("Root") == "Root"


class TestTypeTable:
    """Test primitive type lookup."""

    @pytest.mark.parametrize("language,expected", [
        ("go", ["string", "int64", "float64", "bool", "interface{}"]),
        ("rust", ["String", "i64", "f64", "bool", "serde_json::Value"]),
        ("typescript", ["string", "number", "number", "boolean", "any"]),
        ("python", ["str", "int", "float", "bool", "Any"]),
        ("cobol", ["string", "integer", "number", "boolean", "any"]),
    ])
    def test_map_primitive(self, language, expected):
        kinds = [
            PrimitiveKind.STRING,
            PrimitiveKind.INTEGER,
            PrimitiveKind.NUMBER,
            PrimitiveKind.BOOLEAN,
            PrimitiveKind.ANY,
        ]
        assert [map_primitive(kind, language) for kind in kinds] == expected

    def test_aliases(self):
        assert map_primitive(PrimitiveKind.INTEGER, "ts") == "number"
        assert map_primitive(PrimitiveKind.STRING, "py") == "str"

    def test_wrappers(self):
        assert optional_wrapper("str", "python") == "Optional[str]"
        assert optional_wrapper("i64", "rust") == "Option<i64>"
        assert optional_wrapper("string", "go") == "*string"
        assert optional_wrapper("string", "typescript") == "string | null"
        assert array_wrapper("string", "go") == "[]string"
        assert array_wrapper("String", "rust") == "Vec<String>"
        assert array_wrapper("number", "ts") == "number[]"
        assert array_wrapper("int", "python") == "List[int]"

    @pytest.mark.parametrize("language,expected", [
        ("python", "Optional[List[str]]"),
        ("go", "*[]string"),
        ("typescript", "string[] | null"),
        ("rust", "Option<Vec<String>>"),
    ])
    def test_render_optional_array(self, language, expected):
        slot = _slot("tags", PrimitiveKind.STRING, is_array=True, is_optional=True)
        assert render_field_type(slot, language) == expected

    def test_render_custom(self):
        slot = _slot("items", CustomType("Items"), is_array=True)
        assert render_field_type(slot, "rust") == "Vec<Items>"
        assert render_field_type(_slot("owner", CustomType("Owner")), "go") == "Owner"
