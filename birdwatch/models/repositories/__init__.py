"""
Repositories - Data access layer for database operations.
"""

from birdwatch.models.repositories.bird_repository import BirdRepository

__all__ = ["BirdRepository"]
