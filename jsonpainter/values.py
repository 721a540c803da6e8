"""
Host values for the two JS literal kinds that have no Python spelling.
`UNDEFINED` is what the parser returns for the `undefined` keyword, and
`Symbol` lets callers put symbol-like values into a native value graph.
"""

from typing import Optional


class _Undefined:
    """Singleton marker for the `undefined` literal."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class Symbol:
    """
    A unique value with an optional description, like a JavaScript symbol.
    Two symbols are never equal even when their descriptions match.
    """
    __slots__ = ("description",)

    def __init__(self, description: Optional[str] = None):
        self.description = description

    def __repr__(self):
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"
