"""
Application errors.

Each error maps to one HTTP outcome in ``birdwatch.main``:
- NoRouteMatch: 404, the client asked for a page nobody handles
- TemplateNotFound: 500, a controller action has no matching view
- StoreUnavailable: 503, the database could not be read or written
"""


class BirdwatchError(Exception):
    """Base class for all application errors."""


class NoRouteMatch(BirdwatchError):
    """No route is registered for the requested method and path."""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"No route matches {method} {path}")


class TemplateNotFound(BirdwatchError):
    """The view for a controller action does not exist."""

    def __init__(self, template_name: str):
        self.template_name = template_name
        super().__init__(f"Template not found: {template_name}")


class StoreUnavailable(BirdwatchError):
    """The persistence layer failed or could not be reached."""
