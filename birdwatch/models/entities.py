"""
SQLAlchemy ORM Entity Models

A single table holds every bird. Identity is the auto-incrementing
primary key, so ordering by id gives insertion order. Both timestamps
are maintained by the database rather than by application code.
"""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from birdwatch.database import Base


class Bird(Base):
    """A bird that has been recorded by the watchers."""
    __tablename__ = "birds"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    species = Column(String(100), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<Bird id={self.id} name={self.name!r} species={self.species!r}>"
