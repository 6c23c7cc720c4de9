"""Client-side router — keeps the route table in step with browser navigation.

The router talks to the browser only through the ``wren.host`` protocols.
It picks one of two backends when it is created:

- ``Backend.HISTORY`` when the host supports ``history.pushState`` and the
  ``popstate`` event. Paths live in ``location.pathname``.
- ``Backend.HASH`` otherwise. Paths live in the fragment (``#/todos``)
  and ``hashchange`` drives the handlers.

Handlers fire exactly once per navigation on either backend. ``navigate``
calls the handler itself under HISTORY, because ``pushState`` fires no
event, but leaves it to ``hashchange`` under HASH, because setting the
hash always fires one.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeAlias

from wren.config import RouterConfig
from wren.errors import NotFound
from wren.host import Window
from wren.links import LinkInterceptor
from wren.routing.route import Handler, Route, describe_params
from wren.routing.table import RouteTable

logger = logging.getLogger("wren.router")

# Called with the unmatched path instead of raising NotFound
NotFoundHandler: TypeAlias = Callable[[str], object]


class Backend(Enum):
    """Where the current path is kept."""

    HISTORY = "history"
    HASH = "hash"


class RouterState(Enum):
    CREATED = "created"
    STARTED = "started"
    STOPPED = "stopped"


def path_from_hash(fragment: str) -> str:
    """Return everything after the first ``#`` (the whole string if there is none)."""
    _, sep, path = fragment.partition("#")
    return path if sep else fragment


class Router:
    """Maps browser locations to registered handlers.

    Usage::

        router = Router(window, RouterConfig(intercept_links=True))

        @router.route("/todos/{category}")
        def show_todos(params):
            render(params["category"])

        router.start()
        router.navigate("/todos/work")

    Restarting a stopped router is not supported; ``start()`` may only be
    called once. ``navigate()`` and ``back()`` keep working after ``stop()``
    but no handler runs for host-driven changes any more.
    """

    __slots__ = (
        "_interceptor",
        "_not_found_handler",
        "_state",
        "_table",
        "_window",
        "backend",
        "config",
        "should_intercept_links",
    )

    def __init__(self, window: Window, config: RouterConfig | None = None) -> None:
        self._window = window
        self.config = config or RouterConfig()
        self.should_intercept_links = self.config.intercept_links
        self._table = RouteTable()
        self._state = RouterState.CREATED
        self._not_found_handler: NotFoundHandler | None = None
        self._interceptor = LinkInterceptor(
            window.document, self._table, self.navigate, window.defer
        )

        if window.supports_push_state():
            self.backend = Backend.HISTORY
        else:
            self.backend = Backend.HASH
            logger.debug("pushState unavailable, falling back to hash routing")

    # -- Route registration --

    def handle_func(self, path: str, handler: Handler) -> Route:
        """Call *handler* whenever the current path matches *path*.

        *path* may contain parameters in curly brackets. ``"users/{id}"``
        matches ``/users/123`` and calls the handler with
        ``{"id": "123"}``.

        Raises ``ConfigurationError`` if the template does not compile.
        """
        return self._table.register(path, handler)

    def route(self, path: str) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator."""

        def decorator(func: Handler) -> Handler:
            self.handle_func(path, func)
            return func

        return decorator

    def not_found(self, handler: NotFoundHandler) -> NotFoundHandler:
        """Register a handler for unmatched paths via decorator.

        Without one, an unmatched path raises ``NotFound``.
        """
        self._not_found_handler = handler
        return handler

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in registration order."""
        return self._table.routes

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def state(self) -> RouterState:
        return self._state

    # -- Lifecycle --

    def start(self) -> None:
        """Begin listening for location changes.

        Under HASH, an empty fragment is first set to ``config.root_path``;
        otherwise the handler for the current fragment runs immediately.
        """
        if self._state is not RouterState.CREATED:
            msg = f"Router cannot be started from state {self._state.value!r}."
            raise RuntimeError(msg)

        if self.backend is Backend.HISTORY:
            self._window.add_event_listener("popstate", self._on_popstate)
        else:
            self._window.add_event_listener("hashchange", self._on_hashchange)
        self._state = RouterState.STARTED
        logger.debug("Router started (%s backend)", self.backend.value)

        # A miss in the initial dispatch leaves the router started
        try:
            if self.backend is Backend.HASH:
                self._set_initial_hash()
        finally:
            if self.should_intercept_links:
                self.intercept_links()

    def stop(self) -> None:
        """Stop listening, so no more handlers run for host-driven changes."""
        if self.backend is Backend.HISTORY:
            self._window.remove_event_listener("popstate", self._on_popstate)
        else:
            self._window.remove_event_listener("hashchange", self._on_hashchange)
        self._state = RouterState.STOPPED
        logger.debug("Router stopped")

    # -- Navigation --

    def navigate(self, path: str) -> None:
        """Go to *path* and run its handler.

        Under HISTORY the path is pushed and the handler runs before this
        returns. Under HASH the fragment is set and the handler runs when
        the host fires ``hashchange``.
        """
        logger.debug("Navigate to %r", path)
        try:
            if self.backend is Backend.HISTORY:
                self._window.history.push_state(path)
                self.path_changed(path)
            else:
                self._window.location.set_hash(path)
        finally:
            if self.should_intercept_links:
                self.intercept_links()

    def back(self) -> None:
        """Go back one entry, exactly like the browser's back button."""
        self._window.history.back()
        if self.should_intercept_links:
            self.intercept_links()

    def intercept_links(self) -> int:
        """Route clicks on ``<a href="/...">`` links through ``navigate``.

        Works by binding DOM listeners, so it must run again whenever the
        document changes. With ``should_intercept_links`` set this happens
        on ``start``, ``navigate``, ``back`` and every ``popstate``. DOM
        changes made outside a navigation still need a manual call.

        Returns the number of links bound.
        """
        return self._interceptor.scan()

    def path_changed(self, path: str) -> None:
        """Run the handler of the best route for *path*.

        Raises ``NotFound`` when no route matches, unless a not-found
        handler is registered.
        """
        match = self._table.find_best_match(path)
        if match is None:
            logger.error("Could not find route to match: %s", path)
            if self._not_found_handler is not None:
                self._not_found_handler(path)
                return
            raise NotFound(path)

        params = match.params
        logger.debug("%s -> %s (%s)", path, match.route.path, describe_params(params))
        match.route.handler(params)

    # -- Host events --

    def _set_initial_hash(self) -> None:
        current = self._window.location.get_hash()
        if current == "":
            self._window.location.set_hash(self.config.root_path)
        else:
            self.path_changed(path_from_hash(current))

    def _on_popstate(self, event: object) -> None:
        self._window.defer(self._popstate_task)

    def _popstate_task(self) -> None:
        self.path_changed(self._window.location.get_path())
        if self.should_intercept_links:
            self.intercept_links()

    def _on_hashchange(self, event: object) -> None:
        self._window.defer(self._hashchange_task)

    def _hashchange_task(self) -> None:
        self.path_changed(path_from_hash(self._window.location.get_hash()))
