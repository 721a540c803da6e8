"""
This module turns raw parser output, or any native Python value graph, into
the typed AST defined in `jsonpainter.nodes`.

Every container gets a reference id the first time it is visited. Visiting
the same container again, whether through a cycle or through a shared
reference, yields a CircularReference node instead of descending again, so
building always terminates.
"""

import datetime
import enum
import math
import re
import weakref
from collections.abc import Mapping, Sequence, Set
from typing import Any, Dict, Tuple

from jsonpainter.nodes import (
    ArrayNode,
    ASTNode,
    BooleanNode,
    CircularReference,
    DateNode,
    ErrorNode,
    FunctionNode,
    MapNode,
    NullNode,
    NumberNode,
    ObjectNode,
    RegExpNode,
    SetNode,
    StringNode,
    SymbolNode,
    UndefinedNode,
    WeakMapNode,
    WeakSetNode,
)
from jsonpainter.values import UNDEFINED, Symbol

_WEAK_MAPPINGS = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)
_TEMPORAL = (datetime.date, datetime.time)


def _to_number(value) -> float:
    try:
        return float(value)
    except OverflowError:
        # ints wider than a double saturate the way JavaScript numbers do
        return math.inf if value > 0 else -math.inf


def _property_names(value) -> Dict[str, Any]:
    """Public instance attributes of an arbitrary object, in definition order."""
    attrs = getattr(value, "__dict__", None)
    if not isinstance(attrs, Mapping):
        return {}
    return {
        name: item for name, item in attrs.items()
        if isinstance(name, str) and not name.startswith("_")
    }


class ASTBuilder:
    """
    Builds one AST. The identity map lives on the instance, so a builder must
    not be shared between calls; use the module-level `build` function, which
    creates a fresh builder every time.

    Attributes:
        next_id (int): The reference id the next new container will receive
    """
    def __init__(self):
        # id(container) -> (reference id, container); the container is kept so
        # its id cannot be reused by another object while the build runs
        self._seen: Dict[int, Tuple[int, Any]] = {}
        self.next_id = 0

    def _claim(self, value):
        """Return the existing id for `value` and True, or assign a new id and False."""
        key = id(value)
        if key in self._seen:
            return self._seen[key][0], True
        ref_id = self.next_id
        self.next_id += 1
        self._seen[key] = (ref_id, value)
        return ref_id, False

    def build(self, value: Any) -> ASTNode:
        """
        Classify `value` and return its AST node, recursing into containers.

        Args:
            value: Any Python value

        Returns:
            ASTNode: The typed node for `value`
        """
        # Handle primitives
        if value is None:
            return NullNode()
        if value is UNDEFINED:
            return UndefinedNode()
        if isinstance(value, bool):
            return BooleanNode(value)
        if isinstance(value, Symbol):
            return SymbolNode(value.description)
        if isinstance(value, enum.Enum):
            return SymbolNode(f"{type(value).__name__}.{value.name}")
        if isinstance(value, (int, float)):
            return NumberNode(_to_number(value))
        if isinstance(value, str):
            return StringNode(value)

        # Callables are opaque and never become containers
        if callable(value) and not isinstance(value, (Mapping, BaseException)):
            return FunctionNode(getattr(value, "__name__", None))

        ref_id, seen = self._claim(value)
        if seen:
            return CircularReference(ref_id)

        return self._build_container(value, ref_id)

    def _build_container(self, value: Any, ref_id: int) -> ASTNode:
        # Weak collections are checked first; they also look like mappings and sets
        if isinstance(value, _WEAK_MAPPINGS):
            return WeakMapNode(ref_id)
        if isinstance(value, weakref.WeakSet):
            return WeakSetNode(ref_id)

        if isinstance(value, _TEMPORAL):
            return DateNode(ref_id, value.isoformat())
        if isinstance(value, re.Pattern):
            pattern = value.pattern
            if isinstance(pattern, bytes):
                pattern = pattern.decode("latin-1")
            return RegExpNode(ref_id, pattern)
        if isinstance(value, BaseException):
            return ErrorNode(ref_id, str(value))

        if type(value) is dict:
            properties = {
                key: self.build(item) for key, item in value.items()
                if isinstance(key, str)
            }
            return ObjectNode(ref_id, properties)
        if isinstance(value, Mapping):
            entries = tuple(
                (key if isinstance(key, str) else str(key), self.build(item))
                for key, item in value.items()
            )
            return MapNode(ref_id, entries)

        if isinstance(value, Set):
            return SetNode(ref_id, tuple(self.build(item) for item in value))
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return ArrayNode(ref_id, tuple(self.build(item) for item in value))

        # Anything else renders as a plain object of its public attributes
        properties = {
            name: self.build(item) for name, item in _property_names(value).items()
        }
        return ObjectNode(ref_id, properties)


def build(value: Any) -> ASTNode:
    """
    Build the AST for `value` with a fresh identity map.

    Args:
        value: Raw parser output or any native Python value

    Returns:
        ASTNode: The root node
    """
    return ASTBuilder().build(value)
