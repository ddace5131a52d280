"""Tests for loading seed data."""

import pytest

from birdwatch.errors import StoreUnavailable
from birdwatch.models import BirdCreate
from birdwatch.models.repositories import BirdRepository
from birdwatch.seed import SEED_BIRDS, seed_birds


def test_seed_populates_empty_store(db_session) -> None:
    inserted = seed_birds(db_session)

    birds = BirdRepository(db_session).retrieve_all()
    assert inserted == 4
    assert [(b.name, b.species) for b in birds] == [(s.name, s.species) for s in SEED_BIRDS]


def test_seed_is_idempotent(db_session) -> None:
    seed_birds(db_session)

    assert seed_birds(db_session) == 0
    assert BirdRepository(db_session).count() == 4


def test_seed_completes_after_failed_batch(db_session) -> None:
    repo = BirdRepository(db_session)
    with pytest.raises(StoreUnavailable):
        repo.create_many([
            BirdCreate(name="Robin", species="Turdus migratorius"),
            BirdCreate.model_construct(name=None, species="Unknown"),
        ])

    assert seed_birds(db_session) == 4
    assert repo.count() == 4
