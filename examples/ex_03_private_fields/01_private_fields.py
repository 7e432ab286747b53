"""Private fields: a fresh instance per attribute, never shared.

``Private[T]`` ignores existing nodes of type ``T``. Mapping attributes can be
private too and receive an empty ``dict``.
"""

from __future__ import annotations

from dataclasses import dataclass

from graphwire import Graph, Injected, Node, Private


class Buffer:
    pass


@dataclass
class Pipeline:
    shared: Injected[Buffer | None] = None
    scratch: Private[Buffer | None] = None
    counters: Private[dict[str, int] | None] = None


def main() -> None:
    shared = Buffer()
    first = Pipeline()
    second = Pipeline()

    graph = Graph()
    graph.provide(Node(shared), Node(first), Node(second))
    graph.resolve()

    print(f"shared={first.shared is second.shared is shared}")  # => shared=True
    print(f"scratch_distinct={first.scratch is not second.scratch}")  # => scratch_distinct=True
    print(f"counters={first.counters}")  # => counters={}


if __name__ == "__main__":
    main()
