"""
Minimal element model: the shape of elements handed to the converter.

Mirrors what a Preact-style ``createElement`` produces.  Nothing here
renders; the engine attaches its internal fields (``__k``, ``__e``, ...)
to these objects when it mounts them.
"""

from __future__ import annotations

from typing import Any


def Fragment(props: dict[str, Any]) -> Any:
    """Function component that renders only its children.

    Render graphs never contain a fragment in the RST tree: accessors
    recognise it by identity and splice its children into the parent.
    Unrendered elements report it as an ordinary function component.
    """
    return props.get("children")


class Component:
    """Base class for class components.

    Subclasses implement ``render()``.  The converter only relies on the
    ``props`` attribute and on ``render`` being defined on the class.
    """

    def __init__(self, props: dict[str, Any] | None = None) -> None:
        self.props = props if props is not None else {}
        self.state: dict[str, Any] = {}

    def render(self) -> Any:
        return None


class VNode:
    """An element: type, props, key and ref.

    Engines store their private bookkeeping as extra attributes on the
    instance.
    """

    def __init__(
        self,
        type: Any,
        props: Any = None,
        key: Any = None,
        ref: Any = None,
    ) -> None:
        self.type = type
        self.props = {} if props is None else props
        self.key = key
        self.ref = ref

    def __repr__(self) -> str:
        name = getattr(self.type, "__name__", self.type)
        return f"<VNode {name!r} key={self.key!r}>"


def h(type: Any, props: dict[str, Any] | None = None, *children: Any) -> VNode:
    """Create an element the way ``createElement`` does.

    ``key`` and ``ref`` are moved out of *props* onto the element.  Positional
    children are stored under ``props["children"]``: a single child as-is,
    several as a list.
    """
    normalized: dict[str, Any] = {}
    key = None
    ref = None
    for name, value in (props or {}).items():
        if name == "key":
            key = value
        elif name == "ref":
            ref = value
        else:
            normalized[name] = value

    if len(children) == 1:
        normalized["children"] = children[0]
    elif children:
        normalized["children"] = list(children)

    return VNode(type, normalized, key=key, ref=ref)


def to_child_list(children: Any) -> list[VNode | str]:
    """Flatten a ``children`` prop into a list of elements and strings.

    Nested lists and tuples are spliced in order.  ``None`` and booleans
    (the result of ``cond and child`` expressions) are dropped; numbers
    become strings.
    """
    out: list[VNode | str] = []

    def _collect(value: Any) -> None:
        if value is None or isinstance(value, bool):
            return
        if isinstance(value, (list, tuple)):
            for item in value:
                _collect(item)
        elif isinstance(value, (int, float)):
            out.append(str(value))
        else:
            out.append(value)

    _collect(children)
    return out


def component_type(component: Any) -> Any:
    """Return the class or function a component instance was created from.

    Engines render function components through a generic instance that
    records the function as ``constructor``; class components are
    instances of their own class.
    """
    ctor = getattr(component, "constructor", None)
    return ctor if ctor is not None else type(component)
