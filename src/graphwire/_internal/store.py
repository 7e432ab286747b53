from __future__ import annotations

import random
from typing import Any

from graphwire._internal.type_checks import is_capability_set, satisfies
from graphwire.exceptions import GraphWireDuplicateNameError, GraphWireInvalidRegistrationError
from graphwire.node import Node
from graphwire.traversal import TraversalOrder


class ObjectStore:
    """Own every node of one resolution session.

    Unnamed nodes are candidates for type matching; named nodes are reachable
    by exact name only.
    """

    def __init__(
        self,
        *,
        traversal: TraversalOrder = TraversalOrder.RANDOM,
        rng: random.Random | None = None,
    ) -> None:
        self._traversal = traversal
        self._rng = rng if rng is not None else random.Random()  # noqa: S311
        self._unnamed: list[Node] = []
        self._named: dict[str, Node] = {}
        self._known_ids: set[int] = set()

    def __len__(self) -> int:
        return len(self._unnamed) + len(self._named)

    def register(self, node: Node) -> None:
        """Add a node to the matching partition.

        Args:
            node: Node to add. A node object can be registered only once.

        Raises:
            GraphWireDuplicateNameError: If another node already uses ``node.name``.
            GraphWireInvalidRegistrationError: If the node was already registered
                or an unnamed node wraps a builtin value.

        """
        if id(node) in self._known_ids:
            msg = f"Node {node} was already provided to this graph."
            raise GraphWireInvalidRegistrationError(msg)

        if node.name:
            if node.name in self._named:
                raise GraphWireDuplicateNameError(node.name)
            self._named[node.name] = node
        else:
            value_type = type(node.value)
            if value_type.__module__ == "builtins" and not node.created:
                msg = (
                    f"Unnamed object values must be instances of user-defined classes, "
                    f"got {value_type.__qualname__}. Provide it with a name instead."
                )
                raise GraphWireInvalidRegistrationError(msg)
            self._unnamed.append(node)

        self._known_ids.add(id(node))

    def lookup_by_name(self, name: str) -> Node | None:
        return self._named.get(name)

    def candidates_by_type(self, declared_type: Any) -> list[Node]:
        """Return shareable unnamed nodes that can fill a field of ``declared_type``.

        Concrete types match by exact type identity; protocols and abstract
        classes match every value that satisfies them.
        """
        if is_capability_set(declared_type):
            matches = [
                node
                for node in self._unnamed
                if not node.private and satisfies(node.value, declared_type)
            ]
        else:
            matches = [
                node
                for node in self._unnamed
                if not node.private and type(node.value) is declared_type
            ]
        return self._ordered(matches)

    def all_nodes(self) -> list[Node]:
        return self._ordered([*self._unnamed, *self._named.values()])

    def _ordered(self, nodes: list[Node]) -> list[Node]:
        if self._traversal is TraversalOrder.RANDOM:
            self._rng.shuffle(nodes)
        return nodes


__all__ = ["ObjectStore"]
