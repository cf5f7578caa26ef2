import uuid

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from chirpy_app.database.connection import Base
from chirpy_app.models.timestamps import utcnow


class User(Base):
    """
    Registered user.

    Users are only created and bulk-deleted; nothing updates them.
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    email = Column(String, nullable=False)

    chirps = relationship("Chirp", back_populates="user", passive_deletes=True)
