from __future__ import annotations

from enum import Enum


class TraversalOrder(Enum):
    """Select the order in which the graph hands out nodes.

    Resolution results do not depend on visiting order. ``RANDOM`` also shuffles
    candidate lists reported in errors and the output of ``Graph.objects``.
    """

    RANDOM = "random"
    """Shuffle nodes on every enumeration. Pass ``seed`` to reproduce a run."""

    DETERMINISTIC = "deterministic"
    """Enumerate unnamed nodes in registration order, followed by named nodes."""


__all__ = ["TraversalOrder"]
