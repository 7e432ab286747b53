from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """Wrap one value taking part in graph resolution.

    The value is held by reference, so attributes injected by the resolver are
    visible on the caller's object. ``fields`` records which node satisfied
    each injected attribute; the graph owns every node, not its dependents.

    Args:
        value: Object whose annotated attributes should be filled in, or which
            should be injected into other objects.
        name: Optional unique name. Named nodes are only reachable through
            ``Annotated[T, Inject("name")]`` fields and never by type.
        complete: Mark the value as fully built so its attributes are never
            scanned. It can still be injected elsewhere.

    Examples:
        .. code-block:: python

            graph.provide(
                Node(Settings(), complete=True),
                Node("postgres://localhost/app", name="dsn"),
            )

    """

    value: Any
    name: str | None = None
    complete: bool = False
    fields: dict[str, Node] = field(default_factory=dict, init=False, repr=False)
    created: bool = field(default=False, init=False)
    private: bool = field(default=False, init=False)

    @classmethod
    def synthesized(cls, value: Any, *, private: bool) -> Node:
        node = cls(value)
        node.created = True
        node.private = private
        return node

    def __str__(self) -> str:
        value_type = type(self.value)
        rendered = f"{value_type.__module__}.{value_type.__qualname__}"
        if self.name:
            return f"{rendered} named '{self.name}'"
        return rendered


__all__ = ["Node"]
