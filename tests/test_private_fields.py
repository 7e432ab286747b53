"""Pin the policy for private fields that already hold a value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import pytest

from graphwire import Graph, GraphWireUnsatisfiedDependencyError, Inject, Node, Private


class Buffer:
    pass


@dataclass
class Holder:
    buffer: Private[Buffer | None] = None


@dataclass
class MappingHolder:
    counters: Private[dict[str, int] | None] = None
    shared: Annotated[dict[str, str] | None, Inject("settings")] = None


class Unbuildable:
    def __init__(self, size: int) -> None:
        self.size = size


@dataclass
class UnbuildableHolder:
    item: Private[Unbuildable | None] = None


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_private_field_value_is_replaced_by_default(seed: int) -> None:
    existing = Buffer()
    holder = Holder(buffer=existing)
    graph = Graph(seed=seed)

    graph.provide(Node(holder))
    graph.resolve()

    assert isinstance(holder.buffer, Buffer)
    assert holder.buffer is not existing


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_private_field_value_is_kept_when_overwrite_disabled(seed: int) -> None:
    existing = Buffer()
    holder = Holder(buffer=existing)
    graph = Graph(seed=seed, overwrite_private=False)

    graph.provide(Node(holder))
    graph.resolve()

    assert holder.buffer is existing
    assert len(graph.objects()) == 1


def test_private_mapping_field_gets_fresh_dict(graph: Graph) -> None:
    settings = {"region": "eu"}
    first = MappingHolder()
    second = MappingHolder()

    graph.provide(Node(settings, name="settings"), Node(first), Node(second))
    graph.resolve()

    assert first.counters == {}
    assert second.counters == {}
    assert first.counters is not second.counters
    assert first.shared is settings
    assert second.shared is settings


def test_private_field_of_unbuildable_type_is_unsatisfied(graph: Graph) -> None:
    graph.provide(Node(UnbuildableHolder()))

    with pytest.raises(GraphWireUnsatisfiedDependencyError) as exc_info:
        graph.resolve()

    assert exc_info.value.declared_type is Unbuildable
