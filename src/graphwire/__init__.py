from graphwire.exceptions import (
    GraphWireAmbiguousDependencyError,
    GraphWireDuplicateNameError,
    GraphWireError,
    GraphWireInvalidInjectionError,
    GraphWireInvalidRegistrationError,
    GraphWireStalledResolutionError,
    GraphWireTypeMismatchError,
    GraphWireUnsatisfiedDependencyError,
)
from graphwire.graph import Graph, populate
from graphwire.markers import PRIVATE, Inject, Injected, Private
from graphwire.node import Node
from graphwire.traversal import TraversalOrder
from graphwire.types import TraceLogger

__all__ = [
    "PRIVATE",
    "Graph",
    "GraphWireAmbiguousDependencyError",
    "GraphWireDuplicateNameError",
    "GraphWireError",
    "GraphWireInvalidInjectionError",
    "GraphWireInvalidRegistrationError",
    "GraphWireStalledResolutionError",
    "GraphWireTypeMismatchError",
    "GraphWireUnsatisfiedDependencyError",
    "Inject",
    "Injected",
    "Node",
    "Private",
    "TraceLogger",
    "TraversalOrder",
    "populate",
]
