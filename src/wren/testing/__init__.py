"""Test utilities for wren routers.

Provides an in-memory browser host that implements the ``wren.host``
protocols, with a session history, a task queue, and anchors that record
their listeners::

    from wren.testing import MemoryWindow
"""

from wren.testing.host import (
    MemoryAnchor,
    MemoryClickEvent,
    MemoryDocument,
    MemoryHistory,
    MemoryLocation,
    MemoryWindow,
)

__all__ = [
    "MemoryAnchor",
    "MemoryClickEvent",
    "MemoryDocument",
    "MemoryHistory",
    "MemoryLocation",
    "MemoryWindow",
]
