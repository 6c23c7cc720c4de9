"""Link interception — route in-app link clicks through the router.

Root-relative anchors (``<a href="/todos">``) normally trigger a full page
load. ``LinkInterceptor.scan`` binds a click listener to each of them that
hands the path to ``Router.navigate`` instead, but only when a route
actually matches. Anything else falls through to the browser.

Listeners are bound per scan, and a scan always unbinds the previous
scan's listeners first, so rescanning after every DOM update never
stacks listeners on the same anchor.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from wren.host import Anchor, ClickEvent, ClickListener, Document
from wren.routing.table import RouteTable

logger = logging.getLogger("wren.links")

# Absolute and scheme-relative URLs leave the app
_EXTERNAL_PREFIXES = ("http://", "https://", "//")


def is_external(href: str) -> bool:
    """True for ``http://``, ``https://`` and scheme-relative ``//`` links."""
    return href.startswith(_EXTERNAL_PREFIXES)


@dataclass(frozen=True, slots=True)
class LinkBinding:
    """A click listener installed on one anchor by one scan."""

    anchor: Anchor
    listener: ClickListener


class LinkInterceptor:
    """Rebinds root-relative link clicks to in-app navigation.

    *navigate* is called with the link's path; *defer* schedules it as a
    fresh task so the click handler returns immediately.
    """

    __slots__ = ("_bindings", "_defer", "_document", "_navigate", "_table")

    def __init__(
        self,
        document: Document,
        table: RouteTable,
        navigate: Callable[[str], None],
        defer: Callable[[Callable[[], None]], None],
    ) -> None:
        self._document = document
        self._table = table
        self._navigate = navigate
        self._defer = defer
        # Everything the last scan installed; replaced whole on each scan
        self._bindings: tuple[LinkBinding, ...] = ()

    @property
    def bindings(self) -> tuple[LinkBinding, ...]:
        """Listeners currently installed by this interceptor."""
        return self._bindings

    def scan(self) -> int:
        """Bind a click listener to every root-relative anchor.

        Returns the number of anchors bound.
        """
        self.release()
        bindings: list[LinkBinding] = []
        for anchor in self._document.links():
            href = anchor.get_attribute("href") or ""
            if not href:
                # Ends the whole pass: anchors after an empty href stay unbound.
                break
            if is_external(href) or href.startswith("#"):
                continue
            if href.startswith("/"):
                listener = self._make_listener()
                anchor.add_event_listener("click", listener, True)
                bindings.append(LinkBinding(anchor=anchor, listener=listener))
        self._bindings = tuple(bindings)
        logger.debug("Intercepting %d link(s)", len(bindings))
        return len(bindings)

    def release(self) -> None:
        """Remove every listener installed by the previous scan."""
        for binding in self._bindings:
            binding.anchor.remove_event_listener("click", binding.listener, True)
        self._bindings = ()

    def _make_listener(self) -> ClickListener:
        # A distinct callable per anchor per scan, so each one can be removed on its own
        def on_click(event: ClickEvent) -> None:
            self._on_click(event)

        return on_click

    def _on_click(self, event: ClickEvent) -> None:
        path = event.current_target.get_attribute("href") or ""
        # Unmatched links keep their default behavior
        if self._table.find_best_match(path) is None:
            return
        event.prevent_default()
        self._defer(lambda: self._navigate(path))
