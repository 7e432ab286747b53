from __future__ import annotations

import logging
import random
from typing import Any

from graphwire._internal.fields import FieldInspector
from graphwire._internal.resolver import Resolver
from graphwire._internal.store import ObjectStore
from graphwire.node import Node
from graphwire.traversal import TraversalOrder
from graphwire.types import TraceLogger

logger = logging.getLogger(__name__)


class Graph:
    """Collect partially built objects and fill in their injectable attributes.

    Attributes are marked with ``Inject`` metadata on ``typing.Annotated``
    annotations (see ``Injected`` and ``Private``). ``resolve`` shares one
    instance per concrete type for standard fields, creates a fresh instance
    for private fields, and looks up provided names for named fields. Types
    that are needed but were never provided are created by calling them with
    no arguments.

    A graph is a single-threaded, single-session object: provide the roots,
    call ``resolve`` once, and drop the graph.

    Examples:
        .. code-block:: python

            class Database: ...


            class Repository:
                database: Injected[Database | None] = None


            repository = Repository()
            graph = Graph()
            graph.provide(Node(repository))
            graph.resolve()
            assert isinstance(repository.database, Database)

    """

    def __init__(
        self,
        *,
        logger: TraceLogger | None = None,
        traversal: TraversalOrder = TraversalOrder.RANDOM,
        seed: int | None = None,
        overwrite_private: bool = True,
        max_sweeps: int | None = None,
    ) -> None:
        """Initialize an empty graph.

        Args:
            logger: Optional sink for trace messages, for example a
                ``logging.Logger``. Tracing is disabled when omitted.
            traversal: Order in which nodes and candidates are visited.
            seed: Seed for the random traversal order, for reproducible runs.
            overwrite_private: Replace values already present on private fields.
                When false, private fields are left alone like any other
                field holding a value.
            max_sweeps: Optional upper bound on resolution sweeps. Exceeding it
                raises ``GraphWireStalledResolutionError``.

        """
        self._logger = logger
        self._store = ObjectStore(traversal=traversal, rng=random.Random(seed))  # noqa: S311
        self._resolver = Resolver(
            self._store,
            FieldInspector(),
            logger=logger,
            overwrite_private=overwrite_private,
            max_sweeps=max_sweeps,
        )

    def provide(self, *nodes: Node) -> None:
        """Register nodes with the graph.

        Nodes are registered in order; when one fails the earlier ones stay
        registered.

        Args:
            *nodes: Nodes to add. Each may carry a unique name and may be marked
                complete.

        Raises:
            GraphWireDuplicateNameError: If a name is already taken.
            GraphWireInvalidRegistrationError: If a node is provided twice or an
                unnamed node wraps a builtin value.

        """
        for node in nodes:
            self._store.register(node)
            if self._logger is not None:
                self._logger.debug("provided %s", node)

    def resolve(self) -> None:
        """Fill in every incomplete node, creating missing dependencies on the way.

        Calling ``resolve`` again after success does nothing.

        Raises:
            GraphWireAmbiguousDependencyError: If a standard field matches several
                unnamed nodes.
            GraphWireUnsatisfiedDependencyError: If a field has no possible match.
            GraphWireTypeMismatchError: If a named node does not fit its field.
            GraphWireStalledResolutionError: If private fields recurse into a type
                already being created for them, or ``max_sweeps`` runs out.
            GraphWireInvalidInjectionError: If a field annotation is unsupported
                or a value rejects assignment.

        """
        sweeps = self._resolver.resolve()
        if sweeps:
            logger.debug("Resolved graph of %d nodes in %d sweeps", len(self._store), sweeps)

    def objects(self) -> list[Node]:
        """Return every node known to the graph, including created ones, in no particular order."""
        return self._store.all_nodes()


def populate(*values: Any, **options: Any) -> None:
    """Fill in the injectable attributes of ``values`` using a throwaway graph.

    Args:
        *values: Objects to wire, each provided as an unnamed node.
        **options: Keyword arguments forwarded to ``Graph``.

    """
    graph = Graph(**options)
    graph.provide(*(Node(value) for value in values))
    graph.resolve()


__all__ = ["Graph", "populate"]
