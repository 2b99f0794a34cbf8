"""
Child extractor for legacy (Preact 8) elements.

Preact 8 elements keep their children in an ``element.children`` list
rather than in props, and leave ``ref`` inside ``props``.  Only the
unrendered-element path supports this format.
"""

from __future__ import annotations

from typing import Any

from rstree._base import ChildExtractor
from rstree.vnode import to_child_list


class Preact8ChildExtractor(ChildExtractor):
    """Reads element children from ``element.children``."""

    @property
    def engine_name(self) -> str:
        return "preact8"

    def children_of(self, element: Any) -> list[Any]:
        return to_child_list(getattr(element, "children", None))
