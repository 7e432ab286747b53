from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from graphwire.node import Node


def _type_name(value: Any) -> str:
    qualname = getattr(value, "__qualname__", None)
    if qualname is None:
        return repr(value)
    return f"{value.__module__}.{qualname}"


class GraphWireError(Exception):
    """Represent a base class for all graphwire-specific failures.

    Catch this type when you want to handle any graphwire error path without
    matching each concrete exception class individually.
    """


class GraphWireInvalidRegistrationError(GraphWireError):
    """Signal invalid input to ``Graph.provide``.

    Raised when the same ``Node`` object is provided twice, or when an unnamed
    node wraps a value that cannot take part in type matching (builtins such
    as ``int`` or ``str``).

    Typical fixes include providing such values under a name and referencing
    them with ``Annotated[T, Inject("name")]``.
    """


class GraphWireInvalidInjectionError(GraphWireError):
    """Signal an injectable attribute that cannot be handled.

    Raised while inspecting class annotations (unsupported declared types,
    several ``Inject`` markers on one attribute, unresolvable forward
    references) and when a value refuses attribute assignment.
    """

    def __init__(self, owner: type[Any], field_name: str, reason: str) -> None:
        self.owner = owner
        self.field_name = field_name
        self.reason = reason
        super().__init__(
            f"Cannot inject field '{field_name}' in type {_type_name(owner)}: {reason}.",
        )


class GraphWireDuplicateNameError(GraphWireError):
    """Signal that two nodes were provided with the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Provided two instances named '{name}'.")


class GraphWireAmbiguousDependencyError(GraphWireError):
    """Signal that a standard field matches more than one unnamed node.

    Typical fixes include naming the competing nodes and switching the field
    to a named injection, or removing the extra instance.
    """

    def __init__(
        self,
        owner: type[Any],
        field_name: str,
        declared_type: Any,
        candidates: Sequence[Node],
    ) -> None:
        self.owner = owner
        self.field_name = field_name
        self.declared_type = declared_type
        self.candidates = tuple(candidates)
        rendered = ", ".join(str(candidate) for candidate in self.candidates)
        super().__init__(
            f"Found {len(self.candidates)} assignable values for field '{field_name}' "
            f"of type {_type_name(declared_type)} in {_type_name(owner)}: {rendered}.",
        )


class GraphWireUnsatisfiedDependencyError(GraphWireError):
    """Signal that a field has nothing to be injected with.

    Raised for named fields whose name was never provided, for capability-set
    fields (protocols, abstract classes) with no implementer in the graph, and
    for concrete types that cannot be created without arguments.
    """

    def __init__(
        self,
        owner: type[Any],
        field_name: str,
        declared_type: Any,
        name: str | None = None,
    ) -> None:
        self.owner = owner
        self.field_name = field_name
        self.declared_type = declared_type
        self.name = name
        if name is not None:
            detail = f"did not find object named '{name}'"
        else:
            detail = f"found no assignable value of type {_type_name(declared_type)}"
        super().__init__(
            f"Unsatisfied field '{field_name}' in {_type_name(owner)}: {detail}.",
        )


class GraphWireTypeMismatchError(GraphWireError):
    """Signal that a named node does not fit the field it was requested for."""

    def __init__(
        self,
        owner: type[Any],
        field_name: str,
        declared_type: Any,
        found: Node,
    ) -> None:
        self.owner = owner
        self.field_name = field_name
        self.declared_type = declared_type
        self.found = found
        super().__init__(
            f"Object named '{found.name}' of type {_type_name(type(found.value))} "
            f"is not assignable to field '{field_name}' of type "
            f"{_type_name(declared_type)} in {_type_name(owner)}.",
        )


class GraphWireStalledResolutionError(GraphWireError):
    """Signal that resolution cannot reach a fixed point.

    ``pending`` maps every node still incomplete to the names of its
    unresolved fields.
    """

    def __init__(self, pending: Sequence[tuple[Node, Sequence[str]]], reason: str) -> None:
        self.pending = tuple((node, tuple(fields)) for node, fields in pending)
        self.reason = reason
        rendered = "; ".join(
            f"{node} ({', '.join(fields) or 'no fields'})" for node, fields in self.pending
        )
        super().__init__(f"Resolution stalled, {reason}: {rendered}.")
