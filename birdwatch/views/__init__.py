"""
Views Package - The 'V' in MVC

Views are Jinja2 templates stored under ``templates/``, one directory
per controller namespace and one file per action:

    templates/<namespace>/<action>.html

The ``ViewResolver`` finds the template for a controller action by this
convention and renders it with the values the action produced.
"""

from birdwatch.views.resolver import ViewResolver

__all__ = ["ViewResolver"]
