"""Wren — client-side routing for Python single-page applications.

Maps the browser location to registered handlers, using
``history.pushState`` where the host supports it and the URL fragment
where it does not.

Basic usage::

    from wren import Router, RouterConfig

    router = Router(window, RouterConfig(intercept_links=True))

    @router.route("/todos/{category}")
    def todos(params):
        print(params["category"])

    router.start()

``window`` is any object implementing the ``wren.host`` protocols.
``wren.testing.MemoryWindow`` provides one for tests.
"""

__version__ = "0.1.0"
__all__ = [
    "Backend",
    "ConfigurationError",
    "LinkInterceptor",
    "NotFound",
    "Route",
    "RouteMatch",
    "RouteTable",
    "Router",
    "RouterConfig",
    "RouterState",
    "WrenError",
    "compile_path",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Backend": "wren.router",
    "ConfigurationError": "wren.errors",
    "LinkInterceptor": "wren.links",
    "NotFound": "wren.errors",
    "Route": "wren.routing.route",
    "RouteMatch": "wren.routing.route",
    "RouteTable": "wren.routing.table",
    "Router": "wren.router",
    "RouterConfig": "wren.config",
    "RouterState": "wren.router",
    "WrenError": "wren.errors",
    "compile_path": "wren.routing.compiler",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
