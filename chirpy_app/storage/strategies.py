"""
Persistence gateway using Strategy Pattern.

Services talk to users and chirps only through PersistenceGateway,
never through the ORM directly.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chirpy_app.errors import StoreError
from chirpy_app.models.chirp import Chirp
from chirpy_app.models.user import User


class PersistenceGateway(ABC):
    """
    Abstract base class for the typed CRUD operations on users and chirps.

    Implementations own their concurrency control (transactions, pooling).
    Every failure surfaces as StoreError.
    """

    @abstractmethod
    def create_user(self, email: str) -> User:
        """
        Insert a user.

        Args:
            email: Email address

        Returns:
            The stored user with generated id and timestamps
        """
        pass

    @abstractmethod
    def create_chirp(self, body: str, user_id: UUID) -> Chirp:
        """
        Insert a chirp owned by user_id.

        Args:
            body: Already validated and masked text
            user_id: Owning user (must exist)

        Returns:
            The stored chirp with generated id and timestamps
        """
        pass

    @abstractmethod
    def get_chirp(self, chirp_id: UUID) -> Optional[Chirp]:
        """Get a chirp by id, None if there is no such chirp"""
        pass

    @abstractmethod
    def get_chirps(self) -> List[Chirp]:
        """Get all chirps, oldest first"""
        pass

    @abstractmethod
    def delete_chirps(self) -> None:
        pass

    @abstractmethod
    def delete_users(self) -> None:
        pass


class SQLAlchemyGateway(PersistenceGateway):
    """Gateway backed by a SQLAlchemy ORM session (one per request)"""

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, email: str) -> User:
        user = User(email=email)
        self._commit_new(user)
        return user

    def create_chirp(self, body: str, user_id: UUID) -> Chirp:
        chirp = Chirp(body=body, user_id=user_id)
        self._commit_new(chirp)
        return chirp

    def get_chirp(self, chirp_id: UUID) -> Optional[Chirp]:
        try:
            return self.db.get(Chirp, chirp_id)
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def get_chirps(self) -> List[Chirp]:
        try:
            return list(self.db.scalars(select(Chirp).order_by(Chirp.created_at.asc())))
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def delete_chirps(self) -> None:
        self._commit_delete(Chirp)

    def delete_users(self) -> None:
        self._commit_delete(User)

    def _commit_new(self, instance) -> None:
        """Add, commit and refresh so generated columns are loaded"""
        try:
            self.db.add(instance)
            self.db.commit()
            self.db.refresh(instance)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e

    def _commit_delete(self, model) -> None:
        try:
            self.db.execute(delete(model))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e
