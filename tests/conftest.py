"""Shared pytest fixtures for graphwire tests."""

import pytest

from graphwire import Graph, TraversalOrder
from graphwire._internal.fields import FieldInspector

SEEDS = (3, 7, 13, 31, 71)


@pytest.fixture(params=SEEDS, ids=lambda seed: f"seed={seed}")
def graph(request: pytest.FixtureRequest) -> Graph:
    """Graph with shuffled traversal, reproducible per seed."""
    return Graph(traversal=TraversalOrder.RANDOM, seed=request.param)


@pytest.fixture()
def deterministic_graph() -> Graph:
    """Graph visiting nodes in registration order."""
    return Graph(traversal=TraversalOrder.DETERMINISTIC)


@pytest.fixture()
def field_inspector() -> FieldInspector:
    """FieldInspector instance."""
    return FieldInspector()
