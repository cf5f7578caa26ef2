from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ChirpCreate(BaseModel):
    # Length is checked by the validator, not here, so an overlong body
    # is reported as 400 rather than as a decode failure
    body: str = Field(..., description="Chirp text, at most 140 bytes")
    user_id: UUID = Field(..., description="Author of the chirp")


class ChirpResponse(BaseModel):
    """Serializes the SQLAlchemy Chirp model (from_attributes=True)"""
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID

    model_config = ConfigDict(from_attributes=True)
