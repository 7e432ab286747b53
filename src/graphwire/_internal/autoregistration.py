from __future__ import annotations

import datetime
import decimal
import inspect
import pathlib
import uuid
from dataclasses import dataclass
from typing import Any, TypeGuard

from graphwire._internal.type_checks import is_capability_set, is_runtime_class


@dataclass(frozen=True, slots=True)
class DefaultConstructionPolicy:
    """Internal policy deciding which field types the resolver may create on its own."""

    ignored_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
    )

    def is_default_constructible(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when a candidate can be created by calling it with no arguments.

        Args:
            candidate: Declared field type being checked.

        """
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ == "builtins":
            return False
        if is_capability_set(candidate):
            return False
        if issubclass(candidate, type):
            return False
        if issubclass(candidate, self.ignored_base_types):
            return False
        return not _has_required_parameters(candidate)


def _has_required_parameters(candidate: type[Any]) -> bool:
    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        return candidate.__init__ is not object.__init__
    return any(
        parameter.default is inspect.Parameter.empty
        and parameter.kind
        not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for parameter in signature.parameters.values()
    )


__all__ = ["DefaultConstructionPolicy"]
