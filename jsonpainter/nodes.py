"""
This module defines the typed AST produced by the builder and consumed by
the painter. Every node is an immutable dataclass carrying a single `kind`
discriminant, so a value can only ever be one kind of node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Union


class NodeKind(Enum):
    """Node discriminant. Values double as the palette category names."""
    NULL = "null"
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    FUNCTION = "function"
    ARRAY = "array"
    OBJECT = "object"
    MAP = "map"
    SET = "set"
    WEAKMAP = "weakmap"
    WEAKSET = "weakset"
    DATE = "date"
    REGEXP = "regexp"
    ERROR = "error"
    CIRCULAR_REFERENCE = "circularReference"


# Primitive nodes

@dataclass(frozen=True)
class NullNode:
    kind: ClassVar[NodeKind] = NodeKind.NULL


@dataclass(frozen=True)
class UndefinedNode:
    kind: ClassVar[NodeKind] = NodeKind.UNDEFINED


@dataclass(frozen=True)
class BooleanNode:
    value: bool
    kind: ClassVar[NodeKind] = NodeKind.BOOLEAN


@dataclass(frozen=True)
class NumberNode:
    value: float
    kind: ClassVar[NodeKind] = NodeKind.NUMBER


@dataclass(frozen=True)
class StringNode:
    value: str
    kind: ClassVar[NodeKind] = NodeKind.STRING


@dataclass(frozen=True)
class SymbolNode:
    description: Optional[str] = None
    kind: ClassVar[NodeKind] = NodeKind.SYMBOL


@dataclass(frozen=True)
class FunctionNode:
    """An opaque callable. Only the name is kept, and only for debugging."""
    name: Optional[str] = None
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION


# Container nodes

@dataclass(frozen=True)
class ArrayNode:
    reference_id: int
    elements: Tuple["ASTNode", ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.ARRAY


@dataclass(frozen=True)
class ObjectNode:
    reference_id: int
    properties: Dict[str, "ASTNode"] = field(default_factory=dict)
    kind: ClassVar[NodeKind] = NodeKind.OBJECT


@dataclass(frozen=True)
class MapNode:
    reference_id: int
    # Pairs rather than a dict: distinct keys may share the same text
    entries: Tuple[Tuple[str, "ASTNode"], ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.MAP


@dataclass(frozen=True)
class SetNode:
    reference_id: int
    elements: Tuple["ASTNode", ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.SET


@dataclass(frozen=True)
class WeakMapNode:
    """Weak collections cannot be enumerated, so the node has no child field."""
    reference_id: int
    kind: ClassVar[NodeKind] = NodeKind.WEAKMAP


@dataclass(frozen=True)
class WeakSetNode:
    reference_id: int
    kind: ClassVar[NodeKind] = NodeKind.WEAKSET


@dataclass(frozen=True)
class DateNode:
    reference_id: int
    text: str
    kind: ClassVar[NodeKind] = NodeKind.DATE


@dataclass(frozen=True)
class RegExpNode:
    reference_id: int
    text: str
    kind: ClassVar[NodeKind] = NodeKind.REGEXP


@dataclass(frozen=True)
class ErrorNode:
    reference_id: int
    text: str
    kind: ClassVar[NodeKind] = NodeKind.ERROR


@dataclass(frozen=True)
class CircularReference:
    """Stands in for a container that was already visited in the same build."""
    reference_id: Optional[int] = None
    kind: ClassVar[NodeKind] = NodeKind.CIRCULAR_REFERENCE


ASTNode = Union[
    NullNode,
    UndefinedNode,
    BooleanNode,
    NumberNode,
    StringNode,
    SymbolNode,
    FunctionNode,
    ArrayNode,
    ObjectNode,
    MapNode,
    SetNode,
    WeakMapNode,
    WeakSetNode,
    DateNode,
    RegExpNode,
    ErrorNode,
    CircularReference,
]
