"""Protocol and abstract fields: match any object that has the capability.

Such fields are never created by the graph. They are matched against every
unnamed object once all concrete dependencies exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from graphwire import Graph, Injected, Node


class Clock(Protocol):
    def now(self) -> int: ...


class FixedClock:
    def now(self) -> int:
        return 1_700_000_000


@dataclass
class ClockHolder:
    clock: Injected[FixedClock | None] = None


@dataclass
class Scheduler:
    clock: Injected[Clock | None] = None


def main() -> None:
    scheduler = Scheduler()
    holder = ClockHolder()

    graph = Graph()
    graph.provide(Node(scheduler), Node(holder))
    graph.resolve()

    print(f"now={scheduler.clock.now()}")  # => now=1700000000
    print(f"same_clock={scheduler.clock is holder.clock}")  # => same_clock=True


if __name__ == "__main__":
    main()
