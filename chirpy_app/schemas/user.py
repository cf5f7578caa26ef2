from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    email: str = Field(..., description="Email address of the new user")


class UserResponse(BaseModel):
    """Serializes the SQLAlchemy User model (from_attributes=True)"""
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str

    model_config = ConfigDict(from_attributes=True)
