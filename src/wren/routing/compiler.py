"""Route template compiler.

Turns a template like ``/users/{id}/posts`` into an anchored regular
expression plus the ordered parameter names its capture groups produce.
"""

import re

from wren.errors import ConfigurationError
from wren.routing.route import PathSegment

# ASCII word characters plus "+" and "-"; may be empty
PARAM_PATTERN = r"([A-Za-z0-9_+-]*)"


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route template into segments.

    Empty segments are dropped, so leading, trailing, and repeated
    slashes all collapse.

    Examples::

        "/todos"            -> [PathSegment("todos")]
        "/todos/{category}" -> [PathSegment("todos"), PathSegment("{category}", is_param=True, ...)]
        "//todos//"         -> [PathSegment("todos")]
    """
    segments: list[PathSegment] = []
    for part in path.split("/"):
        if not part:
            continue
        if len(part) >= 2 and part.startswith("{") and part.endswith("}"):
            param_name = part[1:-1]
            if not param_name:
                msg = (
                    f"Route {path!r} has an empty parameter segment '{{}}'. "
                    "Name the parameter, e.g. '{id}'."
                )
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, is_param=True, param_name=param_name))
        else:
            segments.append(PathSegment(value=part))
    return segments


def compile_path(path: str) -> tuple[re.Pattern[str], tuple[str, ...]]:
    """Compile a route template into ``(pattern, param_names)``.

    Literal segments are inserted into the expression as written, without
    escaping. Templates are written by the application, not by users.

    Raises ``ConfigurationError`` if the result is not a valid regular
    expression, or if a literal segment adds capture groups of its own.
    """
    segments = parse_path(path)
    param_names: list[str] = []
    pattern = "^"
    for seg in segments:
        if seg.param_name is not None:
            pattern += "/" + PARAM_PATTERN
            param_names.append(seg.param_name)
        else:
            pattern += "/" + seg.value
    pattern += "/?$"

    try:
        regex = re.compile(pattern)
    except re.error as exc:
        msg = f"Route {path!r} compiles to an invalid pattern {pattern!r}: {exc}"
        raise ConfigurationError(msg) from exc

    if regex.groups != len(param_names):
        msg = (
            f"Route {path!r} has {regex.groups} capture groups but "
            f"{len(param_names)} parameters. Literal segments must not contain "
            "capturing groups; use (?:...) instead."
        )
        raise ConfigurationError(msg)

    return regex, tuple(param_names)
