from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from graphwire.markers import PRIVATE


@dataclass(frozen=True, slots=True)
class Standard:
    """Share the single unnamed node whose type matches the field."""


@dataclass(frozen=True, slots=True)
class Private:
    """Create a fresh node for this field alone."""


@dataclass(frozen=True, slots=True)
class Named:
    """Inject the node provided under ``name``."""

    name: str


Directive: TypeAlias = Standard | Private | Named


def parse_directive(tag: str) -> Directive:
    """Return the directive encoded by an ``Inject`` tag.

    Args:
        tag: Raw tag string. Non-empty tags other than the private keyword are
            taken verbatim as names, whitespace included.

    """
    if tag == "":
        return Standard()
    if tag == PRIVATE:
        return Private()
    return Named(tag)


__all__ = ["Directive", "Named", "Private", "Standard", "parse_directive"]
