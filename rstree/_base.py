"""Abstract bases for engine-specific collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from rstree.vnode import Fragment


class InternalAccessor(ABC):
    """Read-only view over one engine version's render graph.

    Each supported engine major version gets a subclass that knows where
    that version keeps children, DOM nodes and component instances.  The
    converter calls only the methods defined here and never inspects a
    render node directly.
    """

    # ---- identity --------------------------------------------------------

    @property
    @abstractmethod
    def engine_name(self) -> str:
        """Return the engine identifier this accessor understands.

        One of: 'preact10', 'preact10-beta'.
        """
        ...

    # ---- internal fields -------------------------------------------------

    @abstractmethod
    def children_of(self, node: Any) -> Sequence[Any]:
        """Return the rendered children of *node* (entries may be ``None``)."""
        ...

    @abstractmethod
    def component_of(self, node: Any) -> Any | None:
        """Return the component instance rendered for *node*, if any."""
        ...

    @abstractmethod
    def dom_node_of(self, node: Any) -> Any | None:
        """Return the DOM node created for *node*, if any."""
        ...

    @abstractmethod
    def last_render_output_of(self, component: Any) -> Sequence[Any]:
        """Return the nodes *component* produced on its most recent render."""
        ...

    @abstractmethod
    def root_rendered_into(self, container: Any) -> Any | None:
        """Return the render node most recently mounted into *container*."""
        ...

    # ---- public fields ---------------------------------------------------
    #
    # These read the element fields every version exposes under the same
    # name.  Override where a version differs.

    def type_of(self, node: Any) -> Any:
        return getattr(node, "type", None)

    def props_of(self, node: Any) -> Any:
        return getattr(node, "props", None)

    def key_of(self, node: Any) -> Any | None:
        return getattr(node, "key", None) or None

    def ref_of(self, node: Any) -> Any | None:
        return getattr(node, "ref", None) or None

    def text_of(self, node: Any) -> str | None:
        """Return the text content if *node* is a text leaf, else ``None``.

        Released versions represent text as a node with no type and the
        text (a string or number) as its props.
        """
        props = self.props_of(node)
        if (
            self.type_of(node) is None
            and isinstance(props, (str, int, float))
            and not isinstance(props, bool)
        ):
            return str(props)
        return None

    def is_fragment(self, node: Any) -> bool:
        return self.type_of(node) is Fragment


class ShallowTypeResolver(ABC):
    """Recovers the real component type behind a shallow-render stand-in."""

    @abstractmethod
    def real_type_of(self, component: Any) -> Any | None:
        """Return the real type *component* stands in for, or ``None``.

        ``None`` means the component is not a shallow-render stand-in and
        its own type should be reported.
        """
        ...


class NullTypeResolver(ShallowTypeResolver):
    """Resolver for full (non-shallow) rendering: never substitutes a type."""

    def real_type_of(self, component: Any) -> Any | None:
        return None


class ChildExtractor(ABC):
    """Reads the declared children of an unrendered element."""

    @property
    @abstractmethod
    def engine_name(self) -> str:
        """Return the element format this extractor understands."""
        ...

    @abstractmethod
    def children_of(self, element: Any) -> list[Any]:
        """Return the element's children as a flat list of elements and strings."""
        ...

    def ref_of(self, element: Any) -> Any | None:
        """Return the element's ref.

        Current versions keep ``ref`` on the element; older formats left it
        in ``props``.  Both are checked, element first.
        """
        ref = getattr(element, "ref", None)
        if ref:
            return ref
        props = getattr(element, "props", None)
        if isinstance(props, dict):
            return props.get("ref") or None
        return None
