"""
Pydantic Schemas (Data Transfer Objects)

- BirdCreate: data needed to record a new bird (seed step, future forms)
- BirdResponse: a stored bird as returned by the JSON API

Kept apart from the ORM entity so the API contract does not follow
every schema change.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class BirdCreate(BaseModel):
    """Bird data when creating a record."""
    name: str = Field(..., min_length=1, max_length=100, description="Common name, e.g. 'Robin'")
    species: str = Field(..., min_length=1, max_length=100, description="Scientific name")


class BirdResponse(BaseModel):
    """Bird data in API responses."""
    id: int
    name: str
    species: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
