"""Bird Watching - a small MVC web application serving bird sightings."""

__version__ = "1.0.0"
