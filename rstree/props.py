"""Props normalisation for RST nodes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Structural fields; these live on the RST node itself, never in its props.
SPECIAL_PROPS = frozenset({"children", "key", "ref"})

# Engine-specific prop names and their DOM-standard equivalent.
DOM_PROP_ALIASES: dict[str, str] = {
    "class": "className",
}


def strip_special_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *props* without ``children``, ``key`` and ``ref``."""
    return {name: value for name, value in props.items() if name not in SPECIAL_PROPS}


def normalize_host_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """Return the props of a DOM node as Enzyme expects them.

    Special props are stripped and aliases such as ``class`` are renamed
    to their DOM name (``className``).  Order is preserved.
    """
    converted: dict[str, Any] = {}
    for name, value in strip_special_props(props).items():
        converted[DOM_PROP_ALIASES.get(name, name)] = value
    return converted
