"""scopewatch: dirty-checked scopes with synchronous watchers for Python."""

from importlib.metadata import version as _version

__version__ = _version("scopewatch")

from scopewatch.scope import Scope
from scopewatch.watcher import UNINITIALIZED, is_changed

__all__ = [
    "Scope",
    "UNINITIALIZED",
    "is_changed",
]
