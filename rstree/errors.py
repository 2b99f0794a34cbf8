"""Errors raised while converting a render graph to an RST tree."""

from __future__ import annotations

from typing import Any


class ConversionError(RuntimeError):
    """Base class for all conversion failures.

    A conversion either returns a complete tree or raises one of these;
    there is no partial result.
    """


class UnknownNodeType(ConversionError):
    """A node's type is neither a tag name, a component class nor a function."""

    def __init__(self, node_type_value: Any) -> None:
        super().__init__(f"Unknown node type: {node_type_value!r}")
        self.node_type_value = node_type_value


class MissingDomNode(ConversionError):
    """A host node has no DOM reference.

    Usually means the accessor does not match the engine that produced
    the render graph.
    """

    def __init__(self, node_type_value: Any) -> None:
        super().__init__(f"Expected VDOM node to be a DOM node but got {node_type_value!r}")
        self.node_type_value = node_type_value


class RootFragmentArity(ConversionError):
    """The root converted to zero or several nodes instead of exactly one."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Root element must be a fragment with exactly one child, got {count} children"
        )
        self.count = count
