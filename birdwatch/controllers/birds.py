"""
Birds Controller

Page actions for the birds resource. Each action takes the request's
database session and returns the named values its view needs; the
view itself is picked by convention from the namespace and action.
"""

from sqlalchemy.orm import Session

from birdwatch.models.repositories import BirdRepository
from birdwatch.routing import request_handler


@request_handler.route("GET", "/birds", namespace="birds", action="index")
def index(db: Session) -> dict:
    """List every bird in the order it was recorded."""
    return {"birds": BirdRepository(db).retrieve_all()}
