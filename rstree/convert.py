"""
Conversion of render graphs and elements to RST (React Standard Tree) nodes.

Two inputs are supported:

* a container the engine has mounted into.  The converter walks the render
  graph the engine left behind, reading engine internals only through an
  :class:`~rstree._base.InternalAccessor`.  Nodes carry their DOM node or
  component instance.
* an unrendered element (used to seed shallow rendering).  Nothing has been
  mounted, so every ``instance`` is ``None``.

Fragments have no RST representation: their children are spliced into the
parent's ``rendered`` list, and ``None`` children (conditionally rendered
content) are dropped at the same step.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Literal, Union

from rstree._base import ChildExtractor, InternalAccessor, NullTypeResolver, ShallowTypeResolver
from rstree.errors import MissingDomNode, RootFragmentArity, UnknownNodeType
from rstree.node import InspectionNode, RSTChild, classify
from rstree.props import normalize_host_props, strip_special_props
from rstree.vnode import component_type

logger = logging.getLogger(__name__)

NodeKind = Literal["text", "fragment", "component", "host"]

# Result of converting one render node: a fragment yields a list.
Converted = Union[RSTChild, None, list[RSTChild]]


class Converter:
    """Converts render graphs and elements of one engine version to RST nodes.

    The converter holds no state besides its collaborators, so one instance
    can be reused for any number of conversions.

    A converter built without an accessor only converts unrendered
    elements.

    Usage::

        converter = Converter(Preact10Accessor(), Preact10ChildExtractor())
        root = converter.convert_root(container)
        element_tree = converter.convert_descriptor(h(App, {"name": "x"}))

        elements_only = Converter(None, Preact8ChildExtractor())
    """

    def __init__(
        self,
        accessor: InternalAccessor | None,
        extractor: ChildExtractor,
        resolver: ShallowTypeResolver | None = None,
    ) -> None:
        self._accessor_or_none = accessor
        self._extractor = extractor
        self._resolver = resolver if resolver is not None else NullTypeResolver()

    @property
    def _accessor(self) -> InternalAccessor:
        if self._accessor_or_none is None:
            raise RuntimeError(
                "This converter has no render-graph accessor and can only "
                "convert unrendered elements."
            )
        return self._accessor_or_none

    # ---- mounted trees ---------------------------------------------------

    def convert_root(self, container: Any) -> RSTChild:
        """Convert the tree mounted into *container* to a single RST node.

        The engine wraps the root element in a fragment, which is fine as
        long as it resolves to exactly one node.  A root that renders only
        text yields that string.

        Raises:
            RootFragmentArity: If the root resolves to zero or several nodes.
            UnknownNodeType, MissingDomNode: On malformed render graphs.
        """
        rendered = self._accessor.root_rendered_into(container)
        result = self.convert_rendered(rendered)
        if isinstance(result, list):
            if len(result) != 1:
                raise RootFragmentArity(len(result))
            return result[0]
        if result is None:
            raise RootFragmentArity(0)
        return result

    def convert_rendered(self, node: Any) -> Converted:
        """Convert one render node.

        Returns ``None`` for ``None``, a string for text leaves, a flat list
        for fragments and an :class:`InspectionNode` otherwise.
        """
        if node is None:
            return None

        kind = self._kind_of(node)
        if kind == "text":
            return self._accessor.text_of(node)
        elif kind == "fragment":
            return self._convert_children(self._accessor.children_of(node))
        elif kind == "component":
            return self._convert_component(node, self._accessor.component_of(node))
        else:  # "host"
            return self._convert_host(node)

    def _kind_of(self, node: Any) -> NodeKind:
        """Resolve which of the four render node kinds *node* is."""
        accessor = self._accessor
        if accessor.text_of(node) is not None:
            return "text"
        if accessor.is_fragment(node):
            return "fragment"
        if accessor.component_of(node) is not None:
            return "component"
        type_ = accessor.type_of(node)
        if isinstance(type_, str):
            return "host"
        raise UnknownNodeType(type_)

    def _convert_children(self, nodes: Iterable[Any] | None) -> list[RSTChild]:
        """Convert a list of render nodes, splicing fragments and dropping ``None``.

        Each nesting level is flattened once, here, so the result never
        contains lists or ``None``.
        """
        out: list[RSTChild] = []
        for node in nodes or ():
            converted = self.convert_rendered(node)
            if converted is None:
                continue
            if isinstance(converted, list):
                out.extend(converted)
            else:
                out.append(converted)
        return out

    def _convert_host(self, node: Any) -> InspectionNode:
        accessor = self._accessor
        dom = accessor.dom_node_of(node)
        if dom is None:
            raise MissingDomNode(accessor.type_of(node))

        props = accessor.props_of(node)
        return InspectionNode(
            node_type="host",
            type=accessor.type_of(node),
            props=normalize_host_props(props) if isinstance(props, dict) else {},
            key=accessor.key_of(node),
            ref=accessor.ref_of(node),
            instance=dom,
            rendered=tuple(self._convert_children(accessor.children_of(node))),
        )

    def _convert_component(self, node: Any, component: Any) -> InspectionNode:
        ctor = component_type(component)
        node_type = classify(ctor)

        rendered = self._convert_children(self._accessor.last_render_output_of(component))

        # Shallow-rendered components report the type they stand in for.
        real_type = self._resolver.real_type_of(component)
        if real_type is not None:
            logger.debug("Substituting shallow stand-in %r with %r", ctor, real_type)

        props = {"children": []}
        props.update(getattr(component, "props", None) or {})

        return InspectionNode(
            node_type=node_type,
            type=real_type if real_type is not None else ctor,
            props=props,
            key=self._accessor.key_of(node),
            ref=self._accessor.ref_of(node),
            instance=component,
            rendered=tuple(rendered),
        )

    # ---- unrendered elements ---------------------------------------------

    def convert_descriptor(self, element: Any) -> RSTChild | None:
        """Convert an element tree that has not been rendered.

        Strings and ``None`` are returned unchanged.  Children are read
        through the child extractor, so elements in the legacy format
        work too.

        Raises:
            UnknownNodeType: If an element's type cannot be classified.
        """
        if element is None or isinstance(element, str):
            return element

        children = []
        for child in self._extractor.children_of(element):
            converted = self.convert_descriptor(child)
            if converted is not None:
                children.append(converted)

        type_ = getattr(element, "type", None)
        node_type = classify(type_)

        props: dict[str, Any] = {}
        raw_props = getattr(element, "props", None)
        if isinstance(raw_props, dict):
            if node_type == "host":
                props = normalize_host_props(raw_props)
            else:
                props = strip_special_props(raw_props)

        return InspectionNode(
            node_type=node_type,
            type=type_,
            props=props,
            key=getattr(element, "key", None) or None,
            ref=self._extractor.ref_of(element),
            instance=None,
            rendered=tuple(children),
        )
