"""Engine-version detection and accessor dispatch."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rstree._base import ChildExtractor, InternalAccessor

DEFAULT_ENGINE = "preact10"
ENGINE_ENV_VAR = "RSTREE_ENGINE"

logger = logging.getLogger(__name__)


def detect_engine() -> str:
    """Return the configured engine identifier.

    Reads ``RSTREE_ENGINE`` and falls back to ``"preact10"``.
    """
    return os.environ.get(ENGINE_ENV_VAR, "").strip().lower() or DEFAULT_ENGINE


def get_accessor(engine: str | None = None) -> InternalAccessor:
    """Return a fresh render-graph accessor for *engine*.

    Args:
        engine: Force a specific engine ('preact10', 'preact10-beta').
                If None, uses :func:`detect_engine`.

    Raises:
        RuntimeError: If the engine has no accessor.  Legacy (Preact 8)
            render graphs are not supported; only its elements are.
    """
    if engine is None:
        engine = detect_engine()
    logger.debug("Selecting render-graph accessor for engine %s", engine)

    if engine == "preact10":
        from rstree.engines.preact10 import Preact10Accessor

        return Preact10Accessor()
    elif engine == "preact10-beta":
        from rstree.engines.preact10_beta import Preact10BetaAccessor

        return Preact10BetaAccessor()
    else:
        raise RuntimeError(
            f"No accessor available for engine '{engine}'. "
            f"Currently supported: preact10, preact10-beta."
        )


def get_child_extractor(engine: str | None = None) -> ChildExtractor:
    """Return a fresh element child extractor for *engine*.

    Both Preact 10 variants share an element format.

    Raises:
        RuntimeError: If the engine is unknown.
    """
    if engine is None:
        engine = detect_engine()

    if engine in ("preact10", "preact10-beta"):
        from rstree.engines.preact10 import Preact10ChildExtractor

        return Preact10ChildExtractor()
    elif engine == "preact8":
        from rstree.engines.preact8 import Preact8ChildExtractor

        return Preact8ChildExtractor()
    else:
        raise RuntimeError(
            f"No child extractor available for engine '{engine}'. "
            f"Currently supported: preact10, preact10-beta, preact8."
        )
