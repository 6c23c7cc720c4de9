"""Route and RouteMatch frozen dataclasses."""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

# A route handler receives the captured path parameters by name
Handler: TypeAlias = Callable[[dict[str, str]], object]


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route template.

    Literal: ``/todos``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route definition.

    Created by ``RouteTable.register`` and never mutated afterwards.
    ``param_names`` lines up one-to-one with the capture groups of
    ``pattern``.
    """

    path: str
    pattern: re.Pattern[str]
    param_names: tuple[str, ...]
    handler: Handler

    def match(self, path: str) -> tuple[str, ...] | None:
        """Return the ordered captures for *path*, or None if it does not match.

        A parameter group that took no part in the match (possible when a
        literal segment contains a top-level ``|``) captures ``""``.
        """
        m = self.pattern.fullmatch(path)
        if m is None:
            return None
        return m.groups(default="")


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route lookup."""

    route: Route
    captures: tuple[str, ...]

    @property
    def params(self) -> dict[str, str]:
        """Captured values keyed by parameter name (a repeated name keeps the last value)."""
        return dict(zip(self.route.param_names, self.captures, strict=True))


def describe_params(params: Mapping[str, str]) -> str:
    """Render params as ``name=value`` pairs for log lines."""
    return ", ".join(f"{name}={value!r}" for name, value in params.items())
