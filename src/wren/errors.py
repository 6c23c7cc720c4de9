"""Wren exception hierarchy.

Shared across the route table, the router, and the CLI so every module
raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route template cannot be compiled.

    Surfaces at registration time, on the caller's stack. A template that
    fails here is a programming error and should stop start-up.
    """


class NotFound(WrenError):  # noqa: N818 (conventional name in routers)
    """No registered route matched the path.

    Raised by ``RouteTable.match`` and by the router when a navigation
    lands on a path nothing handles.
    """

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail or f"No route matches {path!r}"
        super().__init__(self.detail)
