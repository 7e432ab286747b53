"""Tracing: pass any ``logging.Logger`` to follow resolution step by step.

Messages use lazy ``%`` formatting. Without a logger, tracing is off.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graphwire import Graph, Injected, Node, TraversalOrder


class Cache:
    pass


@dataclass
class Service:
    cache: Injected[Cache | None] = None


class CollectingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def main() -> None:
    handler = CollectingHandler()
    trace_logger = logging.getLogger("graphwire.example")
    trace_logger.addHandler(handler)
    trace_logger.setLevel(logging.DEBUG)
    trace_logger.propagate = False

    graph = Graph(logger=trace_logger, traversal=TraversalOrder.DETERMINISTIC)
    graph.provide(Node(Service()))
    graph.resolve()

    provided, created, assigned, completed_service, completed_cache = handler.messages
    print(provided)  # => provided __main__.Service
    print(created)  # => created __main__.Cache
    print(assigned)  # => assigned new __main__.Cache to field cache in __main__.Service
    print(completed_service)  # => completed __main__.Service
    print(completed_cache)  # => completed __main__.Cache


if __name__ == "__main__":
    main()
