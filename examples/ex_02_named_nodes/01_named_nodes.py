"""Named nodes: inject a specific object by name.

Named nodes never take part in type matching. Values of builtin types such as
strings can only be provided under a name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from graphwire import Graph, Inject, Injected, Node


@dataclass
class Database:
    dsn: str = "sqlite://"


@dataclass
class Reports:
    primary: Injected[Database | None] = None
    replica: Annotated[Database | None, Inject("replica db")] = None
    dsn: Annotated[str | None, Inject("dsn")] = None


def main() -> None:
    replica = Database("postgres://replica")
    reports = Reports()

    graph = Graph()
    graph.provide(
        Node(replica, name="replica db"),
        Node("postgres://primary", name="dsn"),
        Node(reports),
    )
    graph.resolve()

    print(f"primary={reports.primary.dsn}")  # => primary=sqlite://
    print(f"replica={reports.replica.dsn}")  # => replica=postgres://replica
    print(f"dsn={reports.dsn}")  # => dsn=postgres://primary


if __name__ == "__main__":
    main()
