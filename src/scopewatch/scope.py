"""Scope — a plain attribute bag with dirty-checked watchers.

Application code reads and writes attributes on a Scope directly; nothing
is intercepted. Interest in derived values is registered with watch(), and
digest() runs one pass over the watchers, calling the listener of every
watcher whose value changed since the previous pass.

digest() never repeats to reach a fixed point. A listener that changes a
value an earlier watcher depends on is seen on the next digest(), not this
one. Deciding when to digest is up to the caller.

The watcher list is the only framework state on the instance, kept under
the name-mangled __watchers attribute so it cannot clash with application
properties. A scope whose listeners close over it is collected like any
other reference cycle.
"""

from __future__ import annotations

import logging

from scopewatch.watcher import Listener, WatchExpression, Watcher, is_changed

logger = logging.getLogger("scopewatch.scope")


class Scope:
    """Mutable property container observed by dirty-checking.

    Not thread-safe: mutating or digesting one scope from several threads
    needs external synchronization.

    Usage:
        scope = Scope()
        scope.some_value = "a"
        scope.counter = 0

        def bump(new_value, old_value, scope):
            scope.counter += 1

        scope.watch(lambda s: s.some_value, bump)

        scope.digest()  # counter == 1, first pass always fires
        scope.digest()  # counter == 1, some_value unchanged
        scope.some_value = "b"
        scope.digest()  # counter == 2
    """

    def __init__(self) -> None:
        self.__watchers: list[Watcher] = []

    def watch(self, watch_expression: WatchExpression, listener: Listener) -> None:
        """Register listener to be called when watch_expression's value changes.

        watch_expression(scope) is called on every digest(). listener(new, old,
        scope) is called only when the result differs from the previous pass.
        Nothing is evaluated here and nothing is validated: a non-callable
        fails when digest() tries to call it.

        There is no way to remove a watcher once registered.
        """
        self.__watchers.append(Watcher(watch_expression, listener))

    def digest(self) -> None:
        """Evaluate every watcher once, in registration order.

        Each changed watcher's listener runs before the next watcher is
        evaluated. Watchers registered while the pass runs wait for the next
        pass. Exceptions propagate at once: watchers already evaluated keep
        their new values, the remaining ones are not evaluated.
        """
        # Snapshot — listeners may register new watchers during the pass.
        watchers = list(self.__watchers)
        fired = 0
        for watcher in watchers:
            new_value = watcher.watch_expression(self)
            old_value = watcher.last
            if is_changed(new_value, old_value):
                watcher.last = new_value
                fired += 1
                watcher.listener(new_value, old_value, self)
        logger.debug("Digest: %d watchers evaluated, %d fired", len(watchers), fired)

    def __repr__(self) -> str:
        props = ", ".join(
            f"{name}={value!r}"
            for name, value in sorted(vars(self).items())
            if name != "_Scope__watchers"
        )
        count = f"watchers={len(self.__watchers)}"
        return f"Scope({props}, {count})" if props else f"Scope({count})"
