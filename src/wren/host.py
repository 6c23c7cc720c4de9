"""Host-binding protocols.

The router never touches a browser directly. Whatever runs it (Pyodide,
PyScript, a test double) supplies objects with these shapes::

    router = Router(window)

No base class required. The router checks the shape, not the lineage.
``wren.testing.MemoryWindow`` is a complete in-memory implementation.
"""

from collections.abc import Callable, Iterable
from typing import Protocol, TypeAlias

# Window-level listener for "popstate" / "hashchange"; the event object is opaque
Listener: TypeAlias = Callable[[object], None]

# Anchor-level listener for "click"
ClickListener: TypeAlias = Callable[["ClickEvent"], None]


class History(Protocol):
    """The session history (``window.history``)."""

    def push_state(self, path: str) -> None:
        """Push *path* as a new entry without firing ``popstate``."""
        ...

    def back(self) -> None:
        """Move one entry back, as the browser's back button does."""
        ...


class Location(Protocol):
    """The current URL (``window.location``)."""

    def get_hash(self) -> str:
        """Fragment including the leading ``#``, or ``""`` when there is none."""
        ...

    def set_hash(self, value: str) -> None:
        """Replace the fragment. The host fires ``hashchange`` if it changed."""
        ...

    def get_path(self) -> str:
        """The URL path (``location.pathname``)."""
        ...


class Anchor(Protocol):
    """An ``<a>`` element."""

    def get_attribute(self, name: str) -> str | None: ...

    def add_event_listener(
        self, event_type: str, listener: ClickListener, use_capture: bool = False
    ) -> None: ...

    def remove_event_listener(
        self, event_type: str, listener: ClickListener, use_capture: bool = False
    ) -> None: ...


class ClickEvent(Protocol):
    """A click dispatched to an anchor listener."""

    @property
    def current_target(self) -> Anchor: ...

    def prevent_default(self) -> None: ...


class Document(Protocol):
    """The page document."""

    def links(self) -> Iterable[Anchor]:
        """Anchors with an ``href``, in document order (``document.links``)."""
        ...


class Window(Protocol):
    """Top-level host binding handed to ``Router``."""

    @property
    def history(self) -> History: ...

    @property
    def location(self) -> Location: ...

    @property
    def document(self) -> Document: ...

    def supports_push_state(self) -> bool:
        """True when ``history.pushState`` and ``popstate`` are both available."""
        ...

    def add_event_listener(self, event_type: str, listener: Listener) -> None: ...

    def remove_event_listener(self, event_type: str, listener: Listener) -> None: ...

    def defer(self, callback: Callable[[], None]) -> None:
        """Run *callback* later as a fresh task on the host's event loop."""
        ...
