from __future__ import annotations

from typing import Any, get_origin

from graphwire._internal.autoregistration import DefaultConstructionPolicy
from graphwire._internal.directives import Named, Private
from graphwire._internal.fields import FieldInspector, InjectableField
from graphwire._internal.store import ObjectStore
from graphwire._internal.type_checks import satisfies
from graphwire.exceptions import (
    GraphWireAmbiguousDependencyError,
    GraphWireInvalidInjectionError,
    GraphWireStalledResolutionError,
    GraphWireTypeMismatchError,
    GraphWireUnsatisfiedDependencyError,
)
from graphwire.node import Node
from graphwire.types import TraceLogger


class Resolver:
    """Fill in injectable fields of every incomplete node until a fixed point.

    Each sweep visits the working set (incomplete nodes) in store order.
    Standard fields typed with a protocol or abstract class are deferred until
    a sweep resolves nothing else, so every node the graph will ever create
    already exists when capability sets are matched.
    """

    def __init__(
        self,
        store: ObjectStore,
        inspector: FieldInspector,
        *,
        logger: TraceLogger | None = None,
        overwrite_private: bool = True,
        max_sweeps: int | None = None,
        policy: DefaultConstructionPolicy | None = None,
    ) -> None:
        self._store = store
        self._inspector = inspector
        self._logger = logger
        self._overwrite_private = overwrite_private
        self._max_sweeps = max_sweeps
        self._policy = policy if policy is not None else DefaultConstructionPolicy()
        # Types on the chain of private creations that led to each private node.
        self._private_chains: dict[Node, frozenset[Any]] = {}

    def resolve(self) -> int:
        """Run sweeps until the working set is empty.

        Returns:
            Number of sweeps performed. Zero when every node was already complete.

        Raises:
            GraphWireError: The first failure met while resolving a field, or
                ``GraphWireStalledResolutionError`` when private fields recurse
                or the sweep budget runs out.

        """
        sweeps = 0
        while working_set := self._working_set():
            if self._max_sweeps is not None and sweeps >= self._max_sweeps:
                raise GraphWireStalledResolutionError(
                    self._describe(working_set),
                    f"no fixed point after {sweeps} sweeps",
                )
            sweeps += 1
            if not self._sweep(working_set, defer_capability_sets=True):
                # Concrete fixed point reached, every capability set can be matched now.
                self._sweep(working_set, defer_capability_sets=False)
        return sweeps

    def _working_set(self) -> list[Node]:
        return [node for node in self._store.all_nodes() if not node.complete]

    def _sweep(self, nodes: list[Node], *, defer_capability_sets: bool) -> bool:
        progressed = False
        for node in nodes:
            if self._resolve_node(node, defer_capability_sets=defer_capability_sets):
                progressed = True
        return progressed

    def _resolve_node(self, node: Node, *, defer_capability_sets: bool) -> bool:
        changed = False
        deferred = False
        for field in self._inspector.get_fields(type(node.value)):
            if field.name in node.fields or self._is_preset(node, field):
                continue
            if defer_capability_sets and field.is_capability_set:
                deferred = True
                continue
            target = self._resolve_field(node, field)
            self._assign(node, field, target)
            changed = True

        if not deferred:
            node.complete = True
            self._trace("completed %s", node)
            changed = True
        return changed

    def _is_preset(self, node: Node, field: InjectableField) -> bool:
        if getattr(node.value, field.name, None) is None:
            return False
        return not (isinstance(field.directive, Private) and self._overwrite_private)

    def _resolve_field(self, node: Node, field: InjectableField) -> Node:
        directive = field.directive
        if isinstance(directive, Named):
            return self._resolve_named(node, field, directive.name)
        if isinstance(directive, Private):
            chain = self._private_chains.get(node, frozenset())
            if field.declared_type in chain:
                raise GraphWireStalledResolutionError(
                    self._describe(self._working_set()),
                    f"private field {field.name!r} in {node} recurses into {field.declared_type!r}",
                )
            created = self._create(node, field, private=True)
            self._private_chains[created] = chain | {type(created.value)}
            self._trace("assigned new %s to field %s in %s", created, field.name, node)
            return created

        candidates = self._store.candidates_by_type(field.declared_type)
        if len(candidates) > 1:
            raise GraphWireAmbiguousDependencyError(
                type(node.value),
                field.name,
                field.declared_type,
                candidates,
            )
        if candidates:
            if field.is_capability_set:
                self._trace(
                    "assigned %s to capability field %s in %s",
                    candidates[0],
                    field.name,
                    node,
                )
            else:
                self._trace(
                    "assigned existing %s to field %s in %s",
                    candidates[0],
                    field.name,
                    node,
                )
            return candidates[0]
        if field.is_capability_set:
            raise GraphWireUnsatisfiedDependencyError(
                type(node.value),
                field.name,
                field.declared_type,
            )

        created = self._create(node, field, private=False)
        self._trace("assigned new %s to field %s in %s", created, field.name, node)
        return created

    def _resolve_named(self, node: Node, field: InjectableField, name: str) -> Node:
        found = self._store.lookup_by_name(name)
        if found is None:
            raise GraphWireUnsatisfiedDependencyError(
                type(node.value),
                field.name,
                field.declared_type,
                name=name,
            )
        if not satisfies(found.value, field.declared_type):
            raise GraphWireTypeMismatchError(
                type(node.value),
                field.name,
                field.declared_type,
                found,
            )
        self._trace("assigned %s to field %s in %s", found, field.name, node)
        return found

    def _create(self, node: Node, field: InjectableField, *, private: bool) -> Node:
        declared_type = field.declared_type
        value: Any
        if field.is_mapping:
            value = (get_origin(declared_type) or declared_type)()
        elif self._policy.is_default_constructible(declared_type):
            value = declared_type()
        else:
            raise GraphWireUnsatisfiedDependencyError(
                type(node.value),
                field.name,
                declared_type,
            )

        created = Node.synthesized(value, private=private)
        self._store.register(created)
        self._trace("created %s", created)
        return created

    def _assign(self, node: Node, field: InjectableField, target: Node) -> None:
        try:
            setattr(node.value, field.name, target.value)
        except (AttributeError, TypeError) as error:
            raise GraphWireInvalidInjectionError(
                type(node.value),
                field.name,
                f"assignment failed ({error})",
            ) from error
        node.fields[field.name] = target

    def _describe(self, nodes: list[Node]) -> list[tuple[Node, list[str]]]:
        return [
            (
                node,
                [
                    field.name
                    for field in self._inspector.get_fields(type(node.value))
                    if field.name not in node.fields and not self._is_preset(node, field)
                ],
            )
            for node in nodes
        ]

    def _trace(self, msg: str, *args: object) -> None:
        if self._logger is not None:
            self._logger.debug(msg, *args)


__all__ = ["Resolver"]
