"""Watcher records and the change test used by digest().

A Watcher pairs a watch expression with a listener and remembers the value
the expression produced on the previous pass. Before its first pass it holds
UNINITIALIZED, which differs from every real value (None included), so the
first digest always fires the listener.
"""

from __future__ import annotations

from typing import Any, Callable

WatchExpression = Callable[[Any], Any]
Listener = Callable[[Any, Any, Any], None]


class _Uninitialized:
    """Type of the UNINITIALIZED sentinel. There is only one instance."""

    __slots__ = ()
    _instance: _Uninitialized | None = None

    def __new__(cls) -> _Uninitialized:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNINITIALIZED"

    def __reduce__(self):
        return (_Uninitialized, ())


UNINITIALIZED = _Uninitialized()

# Compared by value. Everything else is compared by identity.
_SCALARS = (type(None), bool, int, float, complex, str, bytes)


def is_changed(new: Any, old: Any) -> bool:
    """Strict inequality between two watched values.

    Scalars compare by value, except that bools never equal numbers.
    NaN is never equal to anything, itself included. All other objects
    compare by identity, so an in-place mutation is not a change and an
    equal copy is. That includes Decimal and Fraction: two equal but
    distinct instances are a change.
    """
    if isinstance(new, _SCALARS) and isinstance(old, _SCALARS):
        if isinstance(new, bool) is not isinstance(old, bool):
            return True
        return new != old
    return new is not old


class Watcher:
    """One registered (watch_expression, listener) pair and its last value."""

    __slots__ = ("watch_expression", "listener", "last")

    def __init__(self, watch_expression: WatchExpression, listener: Listener) -> None:
        self.watch_expression = watch_expression
        self.listener = listener
        self.last: Any = UNINITIALIZED

    def __repr__(self) -> str:
        name = getattr(self.watch_expression, "__name__", repr(self.watch_expression))
        state = "uninitialized" if self.last is UNINITIALIZED else f"last={self.last!r}"
        return f"Watcher({name}, {state})"
