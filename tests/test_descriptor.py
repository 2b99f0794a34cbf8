"""Tests for converting unrendered elements (the shallow-rendering seed)."""

from __future__ import annotations

import pytest

from rstree import convert_descriptor
from rstree.convert import Converter
from rstree.engines.preact8 import Preact8ChildExtractor
from rstree.engines.preact10 import Preact10Accessor, Preact10ChildExtractor
from rstree.errors import UnknownNodeType
from rstree.node import InspectionNode
from rstree.vnode import Component, Fragment, VNode, h

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _converter() -> Converter:
    return Converter(Preact10Accessor(), Preact10ChildExtractor())


def _legacy(type_, props=None, children=None) -> VNode:
    """A Preact 8 element: children on the element, ref left in props."""
    element = VNode(type_, dict(props or {}))
    element.children = list(children or [])
    return element


def Greeting(props):
    return None


class Panel(Component):
    def render(self):
        return None


# ---------------------------------------------------------------------------
# Preact 10 elements
# ---------------------------------------------------------------------------


class TestConvertDescriptor:
    def test_none_and_strings_pass_through(self):
        assert _converter().convert_descriptor(None) is None
        assert _converter().convert_descriptor("text") == "text"

    def test_function_component_element(self):
        result = _converter().convert_descriptor(h(Greeting, {"name": "x"}, h("span", None, "hi")))
        assert result.node_type == "function"
        assert result.type is Greeting
        assert result.props == {"name": "x"}
        assert result.instance is None
        assert result.rendered == (
            InspectionNode(node_type="host", type="span", props={}, rendered=("hi",)),
        )

    def test_class_component_element(self):
        result = _converter().convert_descriptor(h(Panel, {"title": "t"}))
        assert result.node_type == "class"
        assert result.props == {"title": "t"}

    def test_host_props_normalized(self):
        result = _converter().convert_descriptor(h("div", {"class": "a", "id": "x"}))
        assert result.props == {"className": "a", "id": "x"}

    def test_component_props_keep_class(self):
        result = _converter().convert_descriptor(h(Greeting, {"class": "a"}))
        assert result.props == {"class": "a"}

    def test_key_and_ref_on_element(self):
        ref = object()
        result = _converter().convert_descriptor(h("li", {"key": "k", "ref": ref}))
        assert result.key == "k"
        assert result.ref is ref
        assert result.props == {}

    def test_children_flattened_and_nulls_dropped(self):
        element = h("ul", None, [h("li"), None, [h("li"), False]], 3)
        result = _converter().convert_descriptor(element)
        assert [c if isinstance(c, str) else c.type for c in result.rendered] == ["li", "li", "3"]

    def test_every_instance_is_none(self):
        element = h(Panel, None, h("div", None, h(Greeting), "t"))
        result = _converter().convert_descriptor(element)
        stack = [result]
        while stack:
            node = stack.pop()
            assert node.instance is None
            stack.extend(c for c in node.rendered if not isinstance(c, str))

    def test_non_mapping_props_become_empty(self):
        result = _converter().convert_descriptor(VNode("div", "not a dict"))
        assert result.props == {}
        assert result.rendered == ()

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownNodeType):
            _converter().convert_descriptor(VNode(None, {}))

    def test_fragment_root_element(self):
        result = _converter().convert_descriptor(h(Fragment, None, h("a"), h("b")))
        assert result.node_type == "function"
        assert result.type is Fragment
        assert result.props == {}
        assert [c.type for c in result.rendered] == ["a", "b"]

    def test_nested_fragment_child(self):
        result = _converter().convert_descriptor(h("div", None, h(Fragment, None, "x")))
        fragment = result.rendered[0]
        assert fragment.type is Fragment
        assert fragment.node_type == "function"
        assert fragment.rendered == ("x",)

    def test_fragment_through_module_level_function(self):
        result = convert_descriptor(h(Fragment, {"key": "f"}, "t"), engine="preact10")
        assert result.key == "f"
        assert result.rendered == ("t",)

    def test_module_level_function(self):
        result = convert_descriptor(h("p", {"class": "c"}), engine="preact10")
        assert result.props == {"className": "c"}

    def test_converter_without_accessor(self):
        converter = Converter(None, Preact10ChildExtractor())
        result = converter.convert_descriptor(h("ul", None, h("li")))
        assert result.rendered[0].type == "li"

    def test_converter_without_accessor_rejects_mounted_trees(self):
        converter = Converter(None, Preact10ChildExtractor())
        with pytest.raises(RuntimeError, match="no render-graph accessor"):
            converter.convert_root(object())


# ---------------------------------------------------------------------------
# Legacy (Preact 8) elements
# ---------------------------------------------------------------------------


class TestLegacyElements:
    def test_ref_nested_in_props(self):
        ref = object()
        element = _legacy("input", {"ref": ref, "value": "v"})
        result = convert_descriptor(element, engine="preact8")
        assert result.ref is ref
        assert result.props == {"value": "v"}

    def test_element_ref_wins_over_props_ref(self):
        element_ref, props_ref = object(), object()
        element = _legacy("input", {"ref": props_ref})
        element.ref = element_ref
        result = convert_descriptor(element, engine="preact8")
        assert result.ref is element_ref

    def test_children_from_element(self):
        element = _legacy("div", {"class": "a"}, ["x", _legacy("b"), None])
        converter = Converter(Preact10Accessor(), Preact8ChildExtractor())
        result = converter.convert_descriptor(element)
        assert result.props == {"className": "a"}
        assert result.rendered[0] == "x"
        assert result.rendered[1].type == "b"
        assert len(result.rendered) == 2
