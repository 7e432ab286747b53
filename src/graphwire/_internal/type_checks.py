from __future__ import annotations

import inspect
import types
from collections.abc import Mapping
from typing import Any, TypeGuard, Union, get_args, get_origin

from typing_extensions import get_protocol_members, is_protocol


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def strip_optional(annotation: Any) -> Any:
    """Return ``T`` for ``Optional[T]`` / ``T | None``, otherwise the annotation itself."""
    if get_origin(annotation) not in (Union, types.UnionType):
        return annotation
    members = [arg for arg in get_args(annotation) if arg is not type(None)]
    if len(members) == 1:
        return members[0]
    return annotation


def is_mapping_type(annotation: Any) -> bool:
    """Return true for ``dict`` and parametrized ``dict[K, V]`` annotations."""
    origin = get_origin(annotation) or annotation
    return is_runtime_class(origin) and issubclass(origin, dict)


def is_capability_set(annotation: Any) -> bool:
    """Return true when a field type is matched structurally rather than by identity.

    Protocols and abstract classes describe capabilities; no single concrete
    type can be created for them.
    """
    if not is_runtime_class(annotation):
        return False
    return is_protocol(annotation) or inspect.isabstract(annotation)


def satisfies(value: object, annotation: Any) -> bool:
    """Return true when ``value`` can be assigned to a field declared as ``annotation``.

    Args:
        value: Candidate value held by a node.
        annotation: Declared field type with ``Optional`` already stripped.

    """
    if is_mapping_type(annotation):
        return isinstance(value, Mapping)
    if not is_runtime_class(annotation):
        return False
    if is_protocol(annotation):
        return all(hasattr(value, member) for member in get_protocol_members(annotation))
    return isinstance(value, annotation)


__all__ = [
    "is_capability_set",
    "is_mapping_type",
    "is_runtime_class",
    "satisfies",
    "strip_optional",
]
