"""
Path-template router for the employee API.

Routes are kept in registration order and matched against the full request
path. Templates use ``{name}`` placeholders, each matching exactly one
non-empty path segment, e.g. ``/employees/{id}``.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

_PLACEHOLDER = re.compile(r'\{([A-Za-z_][A-Za-z0-9_]*)\}')


@dataclass(frozen=True)
class RequestContext:
    """Everything a route handler needs to serve one request."""

    path_params: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    user_id: Optional[str] = None


@dataclass
class HandlerResult:
    """Status code, JSON-serializable body and extra headers produced by a route handler."""

    status_code: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)


RouteHandler = Callable[[RequestContext], HandlerResult]


@dataclass(frozen=True)
class Route:
    method: str
    template: str
    pattern: re.Pattern[str]
    param_names: Tuple[str, ...]
    handler: RouteHandler


@dataclass(frozen=True)
class RouteMatch:
    route: Route
    params: Dict[str, str]


def compile_template(template: str) -> Tuple[re.Pattern[str], Tuple[str, ...]]:
    """
    Compile a path template into an anchored regular expression.

    Args:
        template: Path template such as ``/employees/{id}``

    Returns:
        The compiled pattern and the placeholder names in order of appearance

    Raises:
        ValueError: If a placeholder name is used twice
    """
    parts: List[str] = []
    names: List[str] = []
    position = 0
    for placeholder in _PLACEHOLDER.finditer(template):
        name = placeholder.group(1)
        if name in names:
            raise ValueError(f"Duplicate path parameter '{name}' in template {template}")
        parts.append(re.escape(template[position:placeholder.start()]))
        parts.append(f'(?P<{name}>[^/]+)')
        names.append(name)
        position = placeholder.end()
    parts.append(re.escape(template[position:]))
    return re.compile(''.join(parts)), tuple(names)


class Router:
    """Ordered collection of routes; the first matching route wins."""

    def __init__(self) -> None:
        self._routes: List[Route] = []

    @property
    def routes(self) -> Tuple[Route, ...]:
        return tuple(self._routes)

    def add_route(self, method: str, template: str, handler: RouteHandler) -> Route:
        pattern, param_names = compile_template(template)
        route = Route(method=method, template=template, pattern=pattern, param_names=param_names, handler=handler)
        self._routes.append(route)
        return route

    def route(self, method: str, template: str) -> Callable[[RouteHandler], RouteHandler]:
        """Decorator registering the wrapped function for ``method`` and ``template``."""

        def register(handler: RouteHandler) -> RouteHandler:
            self.add_route(method, template, handler)
            return handler

        return register

    def get(self, template: str) -> Callable[[RouteHandler], RouteHandler]:
        return self.route('GET', template)

    def post(self, template: str) -> Callable[[RouteHandler], RouteHandler]:
        return self.route('POST', template)

    def put(self, template: str) -> Callable[[RouteHandler], RouteHandler]:
        return self.route('PUT', template)

    def delete(self, template: str) -> Callable[[RouteHandler], RouteHandler]:
        return self.route('DELETE', template)

    def match(self, method: str, path: str) -> Optional[RouteMatch]:
        """
        Find the first route registered for ``method`` whose template matches the whole ``path``.

        Method comparison is case-sensitive.

        Returns:
            The matching route with its extracted path parameters, or None
        """
        for route in self._routes:
            if route.method != method:
                continue
            found = route.pattern.fullmatch(path)
            if found:
                return RouteMatch(route=route, params=found.groupdict())
        return None
