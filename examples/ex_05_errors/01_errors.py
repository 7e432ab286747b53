"""Errors: every failure is a ``GraphWireError`` with structured context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Protocol

from graphwire import (
    Graph,
    GraphWireAmbiguousDependencyError,
    GraphWireDuplicateNameError,
    GraphWireUnsatisfiedDependencyError,
    Inject,
    Injected,
    Node,
)


class Cache:
    pass


class Sink(Protocol):
    def write(self, data: str) -> None: ...


@dataclass
class Service:
    cache: Injected[Cache | None] = None


@dataclass
class Logger:
    sink: Injected[Sink | None] = None


@dataclass
class Reporter:
    target: Annotated[Cache | None, Inject("reports")] = None


def main() -> None:
    graph = Graph()
    graph.provide(Node(Cache()), Node(Cache()), Node(Service()))
    try:
        graph.resolve()
    except GraphWireAmbiguousDependencyError as error:
        print(f"ambiguous={error.field_name} n={len(error.candidates)}")  # => ambiguous=cache n=2

    graph = Graph()
    graph.provide(Node(Logger()))
    try:
        graph.resolve()
    except GraphWireUnsatisfiedDependencyError as error:
        print(f"unsatisfied={error.field_name}")  # => unsatisfied=sink

    graph = Graph()
    graph.provide(Node(Reporter()))
    try:
        graph.resolve()
    except GraphWireUnsatisfiedDependencyError as error:
        print(f"missing_name={error.name}")  # => missing_name=reports

    graph = Graph()
    graph.provide(Node(Cache(), name="reports"))
    try:
        graph.provide(Node(Cache(), name="reports"))
    except GraphWireDuplicateNameError as error:
        print(f"duplicate={error.name}")  # => duplicate=reports


if __name__ == "__main__":
    main()
