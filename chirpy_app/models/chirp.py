import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from chirpy_app.database.connection import Base
from chirpy_app.models.timestamps import utcnow


class Chirp(Base):
    """
    Short text posted by a user.

    The body is stored already validated and masked.
    The user_id foreign key is enforced by the database, not by the service.
    """
    __tablename__ = "chirps"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    body = Column(String, nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    user = relationship("User", back_populates="chirps")
