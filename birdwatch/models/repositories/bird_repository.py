"""
Bird Repository - Data access for birds.

Thin pass-through over a SQLAlchemy session. Database failures are
re-raised as StoreUnavailable so callers only deal with one error type.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from birdwatch.errors import StoreUnavailable
from birdwatch.models.entities import Bird
from birdwatch.models.schemas import BirdCreate

logger = logging.getLogger(__name__)


class BirdRepository:
    """Repository for bird database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def retrieve_all(self) -> list[Bird]:
        """
        Get every stored bird.

        Returns:
            All birds in storage (insertion) order
        """
        try:
            return list(self.db.scalars(select(Bird).order_by(Bird.id)).all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to load birds: {e}")
            raise StoreUnavailable("Could not read birds") from e

    def count(self) -> int:
        """Number of stored birds."""
        try:
            return self.db.scalar(select(func.count()).select_from(Bird))
        except SQLAlchemyError as e:
            logger.error(f"Failed to count birds: {e}")
            raise StoreUnavailable("Could not count birds") from e

    def create(self, data: BirdCreate) -> Bird:
        """
        Persist a new bird.

        Args:
            data: Validated name and species

        Returns:
            The stored Bird with its id and timestamps populated
        """
        bird = Bird(name=data.name, species=data.species)
        try:
            self.db.add(bird)
            self.db.commit()
            self.db.refresh(bird)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save bird {data.name!r}: {e}")
            raise StoreUnavailable("Could not save bird") from e
        return bird

    def create_many(self, items: list[BirdCreate]) -> list[Bird]:
        """
        Persist several birds in one transaction.

        Either every bird is stored or none is.

        Args:
            items: Validated birds, stored in the given order

        Returns:
            The stored Birds with ids and timestamps populated
        """
        birds = [Bird(name=data.name, species=data.species) for data in items]
        try:
            self.db.add_all(birds)
            self.db.commit()
            for bird in birds:
                self.db.refresh(bird)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save {len(birds)} birds: {e}")
            raise StoreUnavailable("Could not save birds") from e
        return birds
