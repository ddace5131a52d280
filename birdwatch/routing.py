"""
Request Handler - static route table for HTML pages.

Each page route maps an exact (method, path) pair to a controller
action. The action is identified by a namespace/action pair, which is
also how the view resolver finds the matching template:

    GET /birds  ->  ("birds", "index")  ->  birds/index.html

Routes are registered once at import time with the ``route`` decorator
and never change afterwards. Matching is plain string equality; there
are no path parameters, prefixes or query-string filters.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from sqlalchemy.orm import Session

from birdwatch.errors import NoRouteMatch

logger = logging.getLogger(__name__)

Action = Callable[[Session], Mapping[str, Any]]


@dataclass(frozen=True)
class Route:
    """One entry in the route table."""
    method: str
    path: str
    namespace: str
    action: str
    handler: Action


class RequestHandler:
    """Maps (method, path) pairs to controller actions and runs them."""

    def __init__(self):
        self._routes: dict[tuple[str, str], Route] = {}

    def route(self, method: str, path: str, namespace: str, action: str):
        """Decorator registering a controller action for an exact method and path."""
        key = (method.upper(), path)

        def decorator(func: Action) -> Action:
            if key in self._routes:
                raise ValueError(f"Route already registered: {key[0]} {key[1]}")
            self._routes[key] = Route(
                method=key[0],
                path=path,
                namespace=namespace,
                action=action,
                handler=func,
            )
            return func

        return decorator

    @property
    def routes(self) -> list[Route]:
        """Registered routes in registration order."""
        return list(self._routes.values())

    def match(self, path: str, method: str) -> Route:
        """Find the route for a request or raise NoRouteMatch."""
        route = self._routes.get((method.upper(), path))
        if route is None:
            raise NoRouteMatch(method.upper(), path)
        return route

    def handle(self, path: str, method: str, db: Session) -> tuple[str, str, dict[str, Any]]:
        """
        Dispatch a request to its controller action.

        Args:
            path: Request path, matched exactly (e.g. "/birds")
            method: HTTP method, case-insensitive
            db: Session handed to the action for data access

        Returns:
            (namespace, action, produced_values) for the view resolver
        """
        route = self.match(path, method)
        logger.debug(f"{route.method} {route.path} -> {route.namespace}#{route.action}")
        produced = dict(route.handler(db))
        return route.namespace, route.action, produced


# Shared route table populated by the controllers package
request_handler = RequestHandler()
