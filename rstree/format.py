"""
RST format utilities: wire serialisation, tree walking and statistics.

The wire shape of a node is::

    {"nodeType", "type", "props", "key", "ref", "instance", "rendered"}

with ``rendered`` a list of nodes and plain strings.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from rstree.node import InspectionNode, RSTChild

_JSON_SCALARS = (str, int, float, bool, type(None))


def _json_value(value: Any) -> Any:
    """Return *value* with anything JSON cannot hold replaced by its name."""
    if isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, InspectionNode):
        return to_dict(value, json_safe=True)
    if isinstance(value, (list, tuple)):
        return [_json_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _json_value(v) for k, v in value.items()}
    return type_name(value)


def type_name(type_: Any) -> str:
    """Return a readable name for a node type, component or DOM handle."""
    if isinstance(type_, str):
        return type_
    name = getattr(type_, "display_name", None) or getattr(type_, "__name__", None)
    if name:
        return name
    return type(type_).__name__


# ---------------------------------------------------------------------------
# Wire serialisation
# ---------------------------------------------------------------------------


def to_dict(node: RSTChild, *, json_safe: bool = False) -> Any:
    """Convert an RST node (and its subtree) to the wire dict shape.

    Text leaves stay plain strings.  With ``json_safe=True`` component
    types, instances and non-JSON prop values are replaced by their name
    so the result can be passed to ``json.dumps``.
    """
    if isinstance(node, str):
        return node

    out: dict[str, Any] = {
        "nodeType": node.node_type,
        "type": node.type,
        "props": dict(node.props),
        "key": node.key,
        "ref": node.ref,
        "instance": node.instance,
        "rendered": [to_dict(child, json_safe=json_safe) for child in node.rendered],
    }
    if json_safe:
        out["type"] = type_name(node.type)
        out["props"] = _json_value(out["props"])
        out["key"] = _json_value(node.key)
        out["ref"] = None if node.ref is None else type_name(node.ref)
        out["instance"] = None if node.instance is None else type_name(node.instance)
    return out


# ---------------------------------------------------------------------------
# Walking
# ---------------------------------------------------------------------------


def iter_nodes(root: RSTChild) -> Iterator[InspectionNode]:
    """Yield every node of the tree depth-first, parents before children.

    Text leaves are skipped.
    """
    if isinstance(root, str):
        return
    stack: list[InspectionNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(
            child for child in reversed(node.rendered) if isinstance(child, InspectionNode)
        )


def tree_stats(root: RSTChild) -> dict[str, Any]:
    """Return ``{"nodes", "text", "max_depth", "types"}`` for a tree.

    ``types`` counts nodes per node type (host/class/function).
    """
    stats: dict[str, Any] = {"nodes": 0, "text": 0, "max_depth": 0, "types": {}}

    def _walk(node: RSTChild, depth: int) -> None:
        if isinstance(node, str):
            stats["text"] += 1
            return
        stats["nodes"] += 1
        stats["max_depth"] = max(stats["max_depth"], depth)
        stats["types"][node.node_type] = stats["types"].get(node.node_type, 0) + 1
        for child in node.rendered:
            _walk(child, depth + 1)

    _walk(root, 0)
    return stats
