"""The RST (React Standard Tree) node and node-type classification."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from rstree.errors import UnknownNodeType

NodeType = Literal["host", "class", "function"]


@dataclass(frozen=True)
class InspectionNode:
    """One node of the inspection tree.

    ``rendered`` holds child nodes and plain-string text leaves, in order.
    It never contains ``None`` or fragments.  ``instance`` is the DOM node
    or component instance for mounted nodes and ``None`` for elements that
    were never rendered.
    """

    node_type: NodeType
    type: Any
    props: dict[str, Any] = field(default_factory=dict)
    key: Any = None
    ref: Any = None
    instance: Any = None
    rendered: tuple[RSTChild, ...] = ()


RSTChild = Union[InspectionNode, str]


def classify(type_: Any) -> NodeType:
    """Return the RST node type for an element type.

    Tag names are ``"host"``, classes with a ``render`` method are
    ``"class"`` and any other callable is ``"function"``.
    """
    if isinstance(type_, str):
        return "host"
    if inspect.isclass(type_) and callable(getattr(type_, "render", None)):
        return "class"
    if callable(type_):
        return "function"
    raise UnknownNodeType(type_)
