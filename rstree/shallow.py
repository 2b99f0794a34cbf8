"""
Shallow-render stand-ins and real-type recovery.

Shallow rendering mounts a component while replacing each child component
with a lightweight stand-in that renders nothing but its children.  The
RST tree must still report the replaced component's real type, so the
registry remembers which stand-in belongs to which real type.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from rstree._base import ShallowTypeResolver
from rstree.vnode import component_type

logger = logging.getLogger(__name__)


def _display_name(type_: Any) -> str:
    return getattr(type_, "display_name", None) or getattr(type_, "__name__", repr(type_))


class ShimRegistry(ShallowTypeResolver):
    """Creates shallow-render stand-ins and maps them back to real types.

    One registry is used per shallow render.  Asking twice for the stand-in
    of the same type returns the same function, so keyed reconciliation in
    the engine sees a stable type.

    Usage::

        registry = ShimRegistry()
        stub = registry.make_shim(Button)
        ...  # mount with `stub` substituted for `Button`
        tree = convert_root(container, resolver=registry)
    """

    def __init__(self) -> None:
        self._shims: dict[Any, Callable[..., Any]] = {}
        self._real_types: dict[Callable[..., Any], Any] = {}

    def make_shim(self, real_type: Any) -> Callable[..., Any]:
        """Return the stand-in function component for *real_type*."""
        shim = self._shims.get(real_type)
        if shim is not None:
            return shim

        def shallow_stub(props: dict[str, Any]) -> Any:
            return props.get("children")

        name = f"Shallow({_display_name(real_type)})"
        shallow_stub.__name__ = name
        shallow_stub.__qualname__ = name

        self._shims[real_type] = shallow_stub
        self._real_types[shallow_stub] = real_type
        logger.debug("Created shallow stand-in %s", name)
        return shallow_stub

    def is_shim(self, type_: Any) -> bool:
        try:
            return type_ in self._real_types
        except TypeError:
            # Unhashable types are never registered.
            return False

    def real_type_of(self, component: Any) -> Any | None:
        """Return the real type behind *component*, or ``None``."""
        ctor = component_type(component)
        if self.is_shim(ctor):
            return self._real_types[ctor]
        return None
