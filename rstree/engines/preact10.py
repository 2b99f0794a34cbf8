"""
Accessor for released Preact 10 render graphs.

Preact 10 stores render state on private, minified vnode fields.  The
property mangling in the production build gives them short names:

    __k   rendered children of a vnode (also the root vnode on a container)
    __c   component instance created for a vnode
    __e   DOM node created for a vnode
    __v   a component's own vnode, whose ``__k`` is its last render output

Elements keep their children in ``props["children"]``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rstree._base import ChildExtractor, InternalAccessor
from rstree.vnode import to_child_list

CHILDREN = "__k"
COMPONENT = "__c"
DOM = "__e"
COMPONENT_VNODE = "__v"


class Preact10Accessor(InternalAccessor):
    """Reads the mangled internal fields of Preact 10 vnodes."""

    @property
    def engine_name(self) -> str:
        return "preact10"

    def children_of(self, node: Any) -> Sequence[Any]:
        return getattr(node, CHILDREN, None) or []

    def component_of(self, node: Any) -> Any | None:
        return getattr(node, COMPONENT, None)

    def dom_node_of(self, node: Any) -> Any | None:
        return getattr(node, DOM, None)

    def last_render_output_of(self, component: Any) -> Sequence[Any]:
        vnode = getattr(component, COMPONENT_VNODE, None)
        if vnode is None:
            return []
        return self.children_of(vnode)

    def root_rendered_into(self, container: Any) -> Any | None:
        return getattr(container, CHILDREN, None)


class Preact10ChildExtractor(ChildExtractor):
    """Reads element children from ``props["children"]``."""

    @property
    def engine_name(self) -> str:
        return "preact10"

    def children_of(self, element: Any) -> list[Any]:
        props = getattr(element, "props", None)
        if not isinstance(props, dict):
            return []
        return to_child_list(props.get("children"))
