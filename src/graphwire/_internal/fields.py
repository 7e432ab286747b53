from __future__ import annotations

import ast
import inspect
import sys
from dataclasses import dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from graphwire._internal.directives import Directive, Standard, parse_directive
from graphwire._internal.type_checks import (
    is_capability_set,
    is_mapping_type,
    is_runtime_class,
    strip_optional,
)
from graphwire.exceptions import GraphWireInvalidInjectionError
from graphwire.markers import Inject, Injected, Private

_ANNOTATED_MARKER_MIN_ARGS = 2
_EVALUATION_ERRORS = (AttributeError, NameError, SyntaxError, TypeError)
_MARKERS = (Inject, Injected, Private)
_MARKER_NAMES = frozenset(marker.__name__ for marker in _MARKERS)


@dataclass(frozen=True, slots=True)
class InjectableField:
    """One injectable attribute of a class."""

    name: str
    declared_type: Any
    directive: Directive

    @property
    def is_capability_set(self) -> bool:
        return isinstance(self.directive, Standard) and is_capability_set(self.declared_type)

    @property
    def is_mapping(self) -> bool:
        return is_mapping_type(self.declared_type)


class FieldInspector:
    """Build and cache the injectable-field manifest of classes."""

    def __init__(self) -> None:
        self._cache: dict[type[Any], tuple[InjectableField, ...]] = {}

    def get_fields(self, owner: type[Any]) -> tuple[InjectableField, ...]:
        """Return the injectable fields declared on ``owner`` and its bases.

        Args:
            owner: Class of a node's value.

        Raises:
            GraphWireInvalidInjectionError: If an annotation cannot be evaluated
                or an injectable field has an unsupported declared type.

        """
        cached = self._cache.get(owner)
        if cached is not None:
            return cached

        if owner.__module__ == "builtins":
            self._cache[owner] = ()
            return ()

        fields = tuple(
            field
            for name, hint in self._type_hints(owner).items()
            if (field := self._inspect(owner, name, hint)) is not None
        )
        self._cache[owner] = fields
        return fields

    def _type_hints(self, owner: type[Any]) -> dict[str, Any]:
        try:
            return get_type_hints(owner, include_extras=True)
        except _EVALUATION_ERRORS:
            pass

        # Some annotation does not evaluate, often a TYPE_CHECKING-only import.
        # Evaluate one at a time and drop the failures that carry no marker.
        hints: dict[str, Any] = {}
        for klass in reversed(owner.__mro__):
            if klass.__module__ == "builtins":
                continue
            try:
                annotations = inspect.get_annotations(klass)
            except _EVALUATION_ERRORS as error:
                raise GraphWireInvalidInjectionError(
                    owner,
                    "<annotations>",
                    f"annotations of {klass.__qualname__} cannot be read ({error})",
                ) from error
            namespace = dict(vars(klass))
            globalns = getattr(sys.modules.get(klass.__module__), "__dict__", {})
            for name, annotation in annotations.items():
                try:
                    hints[name] = _evaluate(klass, name, annotation, namespace)
                except _EVALUATION_ERRORS as error:
                    if _references_marker(annotation, {**globalns, **namespace}):
                        raise GraphWireInvalidInjectionError(
                            owner,
                            name,
                            f"annotation cannot be evaluated ({error})",
                        ) from error
                    hints.pop(name, None)
        return hints

    def _inspect(self, owner: type[Any], name: str, hint: Any) -> InjectableField | None:
        annotation = strip_optional(hint)
        if get_origin(annotation) is not Annotated:
            return None

        args = get_args(annotation)
        if len(args) < _ANNOTATED_MARKER_MIN_ARGS:
            return None  # pragma: no cover - Annotated requires at least 2 args

        markers = [item for item in args[1:] if isinstance(item, Inject)]
        if not markers:
            return None
        if len(markers) > 1:
            raise GraphWireInvalidInjectionError(owner, name, "more than one Inject marker")

        declared_type = strip_optional(args[0])
        directive = parse_directive(markers[0].tag)
        self._validate(owner, name, declared_type, directive)
        return InjectableField(name=name, declared_type=declared_type, directive=directive)

    def _validate(
        self,
        owner: type[Any],
        name: str,
        declared_type: Any,
        directive: Directive,
    ) -> None:
        if is_mapping_type(declared_type):
            if isinstance(directive, Standard):
                raise GraphWireInvalidInjectionError(
                    owner,
                    name,
                    "inject on a mapping field must be named or private",
                )
            return
        if not is_runtime_class(declared_type):
            raise GraphWireInvalidInjectionError(
                owner,
                name,
                f"unsupported field type {declared_type!r}",
            )


def _evaluate(klass: type[Any], name: str, annotation: Any, namespace: dict[str, Any]) -> Any:
    holder = type(
        klass.__name__,
        (),
        {"__module__": klass.__module__, "__annotations__": {name: annotation}},
    )
    return get_type_hints(holder, localns=namespace, include_extras=True)[name]


def _references_marker(annotation: Any, namespace: dict[str, Any]) -> bool:
    """Return true when an annotation that failed to evaluate mentions an injection marker."""
    if not isinstance(annotation, str):
        return isinstance(annotation, Inject) or any(
            _references_marker(arg, namespace) for arg in get_args(annotation)
        )
    try:
        tree = ast.parse(annotation, mode="eval")
    except SyntaxError:
        return False
    for node in ast.walk(tree):
        if isinstance(node, ast.Name):
            bound = namespace.get(node.id)
            if any(bound is marker for marker in _MARKERS):
                return True
        elif isinstance(node, ast.Attribute) and node.attr in _MARKER_NAMES:
            return True
    return False


__all__ = ["FieldInspector", "InjectableField"]
