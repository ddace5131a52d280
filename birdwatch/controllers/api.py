"""
Birds API Controller

Read-only JSON view of the same data the birds page shows, for
scripts and other clients that do not want HTML.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from birdwatch.database import get_db
from birdwatch.models import BirdResponse
from birdwatch.models.repositories import BirdRepository

router = APIRouter(prefix="/api/birds", tags=["birds"])


@router.get("", response_model=list[BirdResponse])
def list_birds(db: Session = Depends(get_db)):
    """List all birds in storage order."""
    return [BirdResponse.model_validate(b) for b in BirdRepository(db).retrieve_all()]
