"""
rstree -- React Standard Tree conversion for Preact render graphs.

Turns what a Preact-style engine rendered into the engine-agnostic RST
(React Standard Tree) that Enzyme-style test tooling inspects.

Quick start::

    import rstree

    # Mounted tree -> single RST root
    root = rstree.convert_root(container)
    root.node_type, root.type, root.props, root.rendered

    # Unrendered element -> RST tree with no instances (shallow rendering seed)
    tree = rstree.convert_descriptor(h(Greeting, {"name": "x"}))

    # Shallow rendering: report the real type behind stand-ins
    registry = rstree.ShimRegistry()
    stub = registry.make_shim(Button)
    root = rstree.convert_root(container, resolver=registry)

    # Wire shape
    rstree.to_dict(root, json_safe=True)

The engine version is read from ``RSTREE_ENGINE`` ('preact10' by default,
'preact10-beta', or 'preact8' for elements only) unless passed explicitly.
"""

from __future__ import annotations

from typing import Any

from rstree._base import (
    ChildExtractor,
    InternalAccessor,
    NullTypeResolver,
    ShallowTypeResolver,
)
from rstree._router import detect_engine, get_accessor, get_child_extractor
from rstree.convert import Converter
from rstree.errors import ConversionError, MissingDomNode, RootFragmentArity, UnknownNodeType
from rstree.format import iter_nodes, to_dict, tree_stats, type_name
from rstree.node import InspectionNode, NodeType, RSTChild, classify
from rstree.props import normalize_host_props, strip_special_props
from rstree.shallow import ShimRegistry

__all__ = [
    "convert_root",
    "convert_descriptor",
    "Converter",
    "InspectionNode",
    "NodeType",
    "RSTChild",
    "ShimRegistry",
    # Errors
    "ConversionError",
    "UnknownNodeType",
    "MissingDomNode",
    "RootFragmentArity",
    # Advanced / building blocks
    "InternalAccessor",
    "ShallowTypeResolver",
    "NullTypeResolver",
    "ChildExtractor",
    "get_converter",
    "get_accessor",
    "get_child_extractor",
    "detect_engine",
    "classify",
    "normalize_host_props",
    "strip_special_props",
    "to_dict",
    "iter_nodes",
    "tree_stats",
    "type_name",
]


def get_converter(
    *,
    engine: str | None = None,
    resolver: ShallowTypeResolver | None = None,
) -> Converter:
    """Return a converter wired with the collaborators for *engine*.

    Raises:
        RuntimeError: If the engine has no accessor.
    """
    if engine is None:
        engine = detect_engine()
    return Converter(get_accessor(engine), get_child_extractor(engine), resolver)


def convert_root(
    container: Any,
    *,
    engine: str | None = None,
    resolver: ShallowTypeResolver | None = None,
) -> RSTChild:
    """Convert the tree mounted into *container* to its RST root node.

    Args:
        container: The DOM container the tree was rendered into.
        engine: Engine version ('preact10', 'preact10-beta').  Defaults to
                ``RSTREE_ENGINE``.
        resolver: Shallow-type resolver, e.g. the :class:`ShimRegistry`
                  used for a shallow render.

    Raises:
        RootFragmentArity: If the root renders zero or several top-level nodes.
        UnknownNodeType, MissingDomNode: If the render graph is malformed.
        RuntimeError: If the engine has no accessor.
    """
    return get_converter(engine=engine, resolver=resolver).convert_root(container)


def convert_descriptor(element: Any, *, engine: str | None = None) -> RSTChild | None:
    """Convert an unrendered element tree to RST nodes with no instances.

    Args:
        element: An element, a string or ``None``.
        engine: Element format ('preact10', 'preact10-beta', 'preact8').
                Defaults to ``RSTREE_ENGINE``.
    """
    return Converter(None, get_child_extractor(engine)).convert_descriptor(element)
