"""
Accessor for Preact 10 beta render graphs.

The betas used unmangled field names (``_children``, ``_component``,
``_dom``, ``_prevVNode``) and two text-node formats that were dropped
before the stable release:

    beta 1   text leaves carry their content in ``node.text``
    beta 2   text leaves have no type and the content as ``node.props``
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rstree._base import InternalAccessor


class Preact10BetaAccessor(InternalAccessor):
    """Reads the unmangled internal fields of Preact 10 beta vnodes."""

    @property
    def engine_name(self) -> str:
        return "preact10-beta"

    def children_of(self, node: Any) -> Sequence[Any]:
        return getattr(node, "_children", None) or []

    def component_of(self, node: Any) -> Any | None:
        return getattr(node, "_component", None)

    def dom_node_of(self, node: Any) -> Any | None:
        return getattr(node, "_dom", None)

    def last_render_output_of(self, component: Any) -> Sequence[Any]:
        vnode = getattr(component, "_prevVNode", None)
        if vnode is None:
            return []
        return [vnode]

    def root_rendered_into(self, container: Any) -> Any | None:
        return getattr(container, "_prevVNode", None)

    def text_of(self, node: Any) -> str | None:
        text = getattr(node, "text", None)
        if text is not None:
            return str(text)
        props = self.props_of(node)
        if isinstance(props, (str, int, float)) and not isinstance(props, bool):
            return str(props)
        return None
