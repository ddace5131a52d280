"""
Models Package - Database Entities and Schemas

This package contains the SQLAlchemy ORM model for birds, the Pydantic
schemas used at the API boundary, and the repository that reads and
writes birds.
"""

from birdwatch.models.entities import Bird
from birdwatch.models.schemas import BirdCreate, BirdResponse

__all__ = [
    # ORM entities
    "Bird",
    # Schemas
    "BirdCreate",
    "BirdResponse",
]
