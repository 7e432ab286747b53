from __future__ import annotations

from typing import Protocol


class TraceLogger(Protocol):
    """Receive progress messages while a graph resolves.

    Messages use ``%``-style placeholders with lazily formatted arguments, so a
    ``logging.Logger`` can be passed directly.
    """

    def debug(self, msg: str, *args: object) -> None: ...  # noqa: D102


__all__ = ["TraceLogger"]
