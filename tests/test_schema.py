"""Tests for the RST JSON schema using jsonschema."""

from __future__ import annotations

import json
import pathlib

import pytest
from jsonschema import ValidationError, validate

from rstree.convert import Converter
from rstree.engines.preact10 import Preact10Accessor, Preact10ChildExtractor
from rstree.format import to_dict
from rstree.vnode import Component, h

SCHEMA_DIR = pathlib.Path(__file__).resolve().parent.parent / "schema"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def schema():
    with open(SCHEMA_DIR / "rst.schema.json", encoding="utf-8") as f:
        return json.load(f)


class Layout(Component):
    def render(self):
        return None


def Title(props):
    return None


def _make_node(type_: str, node_type: str = "host", **kwargs) -> dict:
    node = {
        "nodeType": node_type,
        "type": type_,
        "props": {},
        "key": None,
        "ref": None,
        "instance": None,
        "rendered": [],
    }
    node.update(kwargs)
    return node


# ---------------------------------------------------------------------------
# Schema structure
# ---------------------------------------------------------------------------


class TestSchemaStructure:
    def test_schema_valid_json(self, schema):
        assert "$schema" in schema
        assert schema["$ref"] == "#/$defs/node"

    def test_required_fields(self, schema):
        assert set(schema["$defs"]["node"]["required"]) == {
            "nodeType",
            "type",
            "props",
            "key",
            "ref",
            "instance",
            "rendered",
        }

    def test_node_type_enum(self, schema):
        assert set(schema["$defs"]["nodeType"]["enum"]) == {"host", "class", "function"}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestSchemaValidation:
    def test_minimal_node_valid(self, schema):
        validate(instance=_make_node("div"), schema=schema)

    def test_nested_with_text_valid(self, schema):
        node = _make_node("p", rendered=["Hi", _make_node("b")])
        validate(instance=node, schema=schema)

    def test_converted_element_tree_valid(self, schema):
        converter = Converter(Preact10Accessor(), Preact10ChildExtractor())
        element = h(
            Layout,
            {"key": "root"},
            h("div", {"class": "a", "ref": {"current": None}}, "Hi", h(Title, {"text": "t"})),
        )
        validate(instance=to_dict(converter.convert_descriptor(element), json_safe=True), schema=schema)

    def test_missing_field_invalid(self, schema):
        node = _make_node("div")
        del node["rendered"]
        with pytest.raises(ValidationError):
            validate(instance=node, schema=schema)

    def test_unknown_node_type_invalid(self, schema):
        with pytest.raises(ValidationError):
            validate(instance=_make_node("div", node_type="fragment"), schema=schema)

    def test_null_in_rendered_invalid(self, schema):
        with pytest.raises(ValidationError):
            validate(instance=_make_node("div", rendered=[None]), schema=schema)

    def test_key_in_props_invalid(self, schema):
        with pytest.raises(ValidationError):
            validate(instance=_make_node("div", props={"key": "k"}), schema=schema)

    def test_extra_field_invalid(self, schema):
        node = _make_node("div", children=[])
        with pytest.raises(ValidationError):
            validate(instance=node, schema=schema)
