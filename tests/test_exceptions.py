"""Tests for the graphwire exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Literal

import pytest

from graphwire import (
    Graph,
    GraphWireAmbiguousDependencyError,
    GraphWireDuplicateNameError,
    GraphWireError,
    GraphWireInvalidInjectionError,
    GraphWireInvalidRegistrationError,
    GraphWireStalledResolutionError,
    GraphWireTypeMismatchError,
    GraphWireUnsatisfiedDependencyError,
    Inject,
    Injected,
    Node,
    Private,
)


class Service:
    pass


class NeedsArguments:
    def __init__(self, url: str) -> None:
        self.url = url


@dataclass
class Consumer:
    service: Injected[Service | None] = None


@dataclass
class NeedsConstructorArguments:
    dependency: Injected[NeedsArguments | None] = None


@dataclass(frozen=True)
class FrozenConsumer:
    service: Injected[Service | None] = None


@dataclass
class Tree:
    child: Private[Tree | None] = None


@dataclass
class Left:
    right: Private[Right | None] = None


@dataclass
class Right:
    left: Private[Left | None] = None


class Fourth:
    pass


@dataclass
class Third:
    fourth: Injected[Fourth | None] = None


@dataclass
class Second:
    third: Injected[Third | None] = None


@dataclass
class First:
    second: Injected[Second | None] = None


class DoubleMarked:
    service: Annotated[Service | None, Inject(), Inject("other")] = None


class LiteralField:
    mode: Annotated[Literal["a", "b"] | None, Inject()] = None


class UnionField:
    value: Annotated[Service | Consumer | None, Inject()] = None


class BrokenForwardRef:
    value: Injected[DoesNotExist]  # type: ignore[name-defined]  # noqa: F821


class TestGraphWireDuplicateNameError:
    def test_raises_when_name_is_provided_twice(self, graph: Graph) -> None:
        graph.provide(Node(Service(), name="svc"))

        with pytest.raises(GraphWireDuplicateNameError) as exc_info:
            graph.provide(Node(Service(), name="svc"))

        assert exc_info.value.name == "svc"
        assert "named 'svc'" in str(exc_info.value)

    def test_earlier_nodes_stay_registered(self, graph: Graph) -> None:
        with pytest.raises(GraphWireDuplicateNameError):
            graph.provide(
                Node(Service(), name="svc"),
                Node(Service(), name="svc"),
            )

        assert len(graph.objects()) == 1


class TestGraphWireInvalidRegistrationError:
    def test_raises_when_node_is_provided_twice(self, graph: Graph) -> None:
        node = Node(Service())
        graph.provide(node)

        with pytest.raises(GraphWireInvalidRegistrationError, match="already provided"):
            graph.provide(node)

    def test_raises_for_unnamed_builtin_value(self, graph: Graph) -> None:
        with pytest.raises(GraphWireInvalidRegistrationError, match="Provide it with a name"):
            graph.provide(Node("postgres://localhost"))

    def test_named_builtin_value_is_accepted(self, graph: Graph) -> None:
        graph.provide(Node("postgres://localhost", name="dsn"))
        graph.resolve()

        assert [node.name for node in graph.objects()] == ["dsn"]


class TestGraphWireUnsatisfiedDependencyError:
    def test_raises_for_type_needing_constructor_arguments(self, graph: Graph) -> None:
        graph.provide(Node(NeedsConstructorArguments()))

        with pytest.raises(GraphWireUnsatisfiedDependencyError) as exc_info:
            graph.resolve()

        assert exc_info.value.declared_type is NeedsArguments
        assert exc_info.value.owner is NeedsConstructorArguments

    def test_provided_instance_satisfies_type_needing_arguments(self, graph: Graph) -> None:
        dependency = NeedsArguments("x")
        consumer = NeedsConstructorArguments()
        graph.provide(Node(dependency), Node(consumer))

        graph.resolve()

        assert consumer.dependency is dependency


class TestGraphWireInvalidInjectionError:
    def test_raises_for_two_markers(self, graph: Graph) -> None:
        graph.provide(Node(DoubleMarked()))

        with pytest.raises(GraphWireInvalidInjectionError, match="more than one Inject marker"):
            graph.resolve()

    def test_raises_for_literal_field(self, graph: Graph) -> None:
        graph.provide(Node(LiteralField()))

        with pytest.raises(GraphWireInvalidInjectionError, match="unsupported field type"):
            graph.resolve()

    def test_raises_for_union_field(self, graph: Graph) -> None:
        graph.provide(Node(UnionField()))

        with pytest.raises(GraphWireInvalidInjectionError) as exc_info:
            graph.resolve()

        assert exc_info.value.field_name == "value"

    def test_raises_for_unresolvable_forward_reference(self, graph: Graph) -> None:
        graph.provide(Node(BrokenForwardRef()))

        with pytest.raises(GraphWireInvalidInjectionError) as exc_info:
            graph.resolve()

        assert isinstance(exc_info.value.__cause__, NameError)

    def test_raises_when_value_rejects_assignment(self, graph: Graph) -> None:
        graph.provide(Node(FrozenConsumer()))

        with pytest.raises(GraphWireInvalidInjectionError, match="assignment failed"):
            graph.resolve()


class TestGraphWireStalledResolutionError:
    def test_raises_when_private_field_recurses_into_own_type(self, graph: Graph) -> None:
        graph.provide(Node(Tree()))

        with pytest.raises(GraphWireStalledResolutionError) as exc_info:
            graph.resolve()

        assert "private field 'child'" in str(exc_info.value)
        assert exc_info.value.pending
        assert all(fields == ("child",) for _, fields in exc_info.value.pending)

    def test_raises_when_private_fields_recurse_through_each_other(self, graph: Graph) -> None:
        graph.provide(Node(Left()))

        with pytest.raises(GraphWireStalledResolutionError, match="recurses into"):
            graph.resolve()

        assert len(graph.objects()) <= 4

    def test_raises_when_sweep_budget_is_exhausted(self) -> None:
        graph = Graph(max_sweeps=2, seed=1)
        graph.provide(Node(First()))

        with pytest.raises(GraphWireStalledResolutionError) as exc_info:
            graph.resolve()

        assert "no fixed point after 2 sweeps" in str(exc_info.value)
        ((node, fields),) = exc_info.value.pending
        assert isinstance(node.value, Third)
        assert fields == ("fourth",)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            GraphWireAmbiguousDependencyError,
            GraphWireDuplicateNameError,
            GraphWireInvalidInjectionError,
            GraphWireInvalidRegistrationError,
            GraphWireStalledResolutionError,
            GraphWireTypeMismatchError,
            GraphWireUnsatisfiedDependencyError,
        ],
    )
    def test_every_error_is_graphwire_error(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, GraphWireError)
        assert issubclass(error_type, Exception)

    def test_catching_base_error(self, graph: Graph) -> None:
        graph.provide(Node(Service()), Node(Service()), Node(Consumer()))

        with pytest.raises(GraphWireError):
            graph.resolve()
