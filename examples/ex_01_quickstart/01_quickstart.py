"""Quickstart: fill in annotated attributes across an object graph.

Provide the objects you already have, mark injectable attributes with
``Injected[...]``, and let the graph create and share everything else.
"""

from __future__ import annotations

from dataclasses import dataclass

from graphwire import Graph, Injected, Node


@dataclass
class Answer:
    answer: int = 0


@dataclass
class Nested:
    answer: Injected[Answer | None] = None


@dataclass
class Root:
    answer: Injected[Answer | None] = None
    nested: Injected[Nested | None] = None


def main() -> None:
    answer = Answer(42)
    root = Root()

    graph = Graph()
    graph.provide(Node(answer), Node(Nested()), Node(root))
    graph.resolve()

    print(f"root_answer={root.answer.answer}")  # => root_answer=42
    print(f"shared={root.answer is root.nested.answer}")  # => shared=True

    graph.resolve()
    print(f"nodes={len(graph.objects())}")  # => nodes=3


if __name__ == "__main__":
    main()
