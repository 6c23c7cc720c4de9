"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(intercept_links=True)
    """

    # Rebind root-relative <a href="/..."> clicks after every navigation.
    # Seeds Router.should_intercept_links, which stays writable at runtime.
    intercept_links: bool = False

    # Hash written by start() when the page loads with an empty fragment
    root_path: str = "/"
