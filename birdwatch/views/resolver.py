"""
View Resolver - conventional template lookup and rendering.

Given the namespace and action of the controller that handled a request,
the resolver loads ``<namespace>/<action>.html`` from the templates
directory and renders it with the action's values in scope. Escaping is
whatever Jinja2's HTML autoescape provides.
"""

import logging
from typing import Any, Mapping

import jinja2

from birdwatch.errors import TemplateNotFound

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".html"


class ViewResolver:
    """Renders the template matching a controller action."""

    def __init__(self, templates_dir: str):
        self.templates_dir = templates_dir
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(templates_dir),
            autoescape=jinja2.select_autoescape(["html"]),
            # No template cache: every render reads the file on disk
            cache_size=0,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @staticmethod
    def template_name(namespace: str, action: str) -> str:
        """Template identifier for a namespace/action pair, e.g. 'birds/index.html'."""
        return f"{namespace}/{action}{TEMPLATE_EXTENSION}"

    def resolve_and_render(self, namespace: str, action: str, produced_values: Mapping[str, Any]) -> str:
        """
        Render the view for a controller action.

        Args:
            namespace: Controller namespace (template directory)
            action: Action name (template file stem)
            produced_values: Values bound as template variables

        Returns:
            Rendered HTML

        Raises:
            TemplateNotFound: No template exists for the pair
        """
        name = self.template_name(namespace, action)
        try:
            template = self.env.get_template(name)
        except jinja2.TemplateNotFound as e:
            logger.error(f"No view for {namespace}#{action} in {self.templates_dir}")
            raise TemplateNotFound(name) from e
        return template.render(**produced_values)
