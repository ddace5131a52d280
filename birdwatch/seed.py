"""
Seed data for a fresh database.

Run on application startup (when ``seed_on_startup`` is set) or by hand:

    python -m birdwatch.seed
"""

import logging

from sqlalchemy.orm import Session

from birdwatch.models import BirdCreate
from birdwatch.models.repositories import BirdRepository

logger = logging.getLogger(__name__)

SEED_BIRDS = [
    BirdCreate(name="Robin", species="Turdus migratorius"),
    BirdCreate(name="Blue Jay", species="Cyanocitta cristata"),
    BirdCreate(name="Cardinal", species="Cardinalis cardinalis"),
    BirdCreate(name="Sparrow", species="Passeridae"),
]


def seed_birds(db: Session) -> int:
    """
    Insert the seed birds if the table is empty.

    The batch is committed once, so a failure leaves the table empty and
    the next run seeds again.

    Returns:
        Number of birds inserted (0 when the table already had data)
    """
    repo = BirdRepository(db)
    if repo.count():
        logger.info("Birds table already populated, skipping seed")
        return 0

    repo.create_many(SEED_BIRDS)
    logger.info(f"Seeded {len(SEED_BIRDS)} birds")
    return len(SEED_BIRDS)


def main() -> None:
    from birdwatch.config import get_settings
    from birdwatch.database import init_db, init_engine, make_session_factory
    from birdwatch.logging_config import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level)
    engine = init_engine(settings)
    init_db(engine)
    db = make_session_factory(engine)()
    try:
        seed_birds(db)
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
