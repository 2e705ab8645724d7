"""Core utilities shared across formatting and validation layers.

Exports:
    RWLock: Readers-writer lock used by the locale code cache
    is_babel_available: Availability check for the Babel formatting capability

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .rwlock import RWLock

__all__ = ["BabelImportError", "RWLock", "is_babel_available", "require_babel"]
