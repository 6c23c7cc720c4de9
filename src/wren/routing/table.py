"""Ordered route table with best-match lookup.

Every lookup scans all routes in registration order. The winner is the
matching route with the fewest parameters, so ``/todos/work`` beats
``/todos/{category}`` for the path ``/todos/work``. On a tie the route
registered first wins.
"""

from collections.abc import Iterator

from wren.errors import NotFound
from wren.routing.compiler import compile_path
from wren.routing.route import Handler, Route, RouteMatch


class RouteTable:
    """Routes in registration order.

    Usage::

        table = RouteTable()
        table.register("/todos/{category}", show_category)
        match = table.find_best_match("/todos/work")
        if match is not None:
            match.route.handler(match.params)
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[Route] = []

    def register(self, path: str, handler: Handler) -> Route:
        """Compile *path* and append the route.

        Raises ``ConfigurationError`` if the template does not compile.
        """
        pattern, param_names = compile_path(path)
        route = Route(path=path, pattern=pattern, param_names=param_names, handler=handler)
        self._routes.append(route)
        return route

    @property
    def routes(self) -> tuple[Route, ...]:
        """Snapshot of the registered routes, in registration order."""
        return tuple(self._routes)

    def find_best_match(self, path: str) -> RouteMatch | None:
        """Return the best matching route for *path*, or None."""
        best: RouteMatch | None = None
        for route in self._routes:
            captures = route.match(path)
            if captures is None:
                continue
            # Strictly fewer: equal counts keep the earlier route
            if best is None or len(captures) < len(best.captures):
                best = RouteMatch(route=route, captures=captures)
        return best

    def match(self, path: str) -> RouteMatch:
        """Like ``find_best_match`` but raises ``NotFound`` on a miss."""
        best = self.find_best_match(path)
        if best is None:
            raise NotFound(path)
        return best

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)
