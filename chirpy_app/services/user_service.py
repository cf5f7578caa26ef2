from chirpy_app.errors import StoreError
from chirpy_app.models.user import User
from chirpy_app.storage.strategies import PersistenceGateway


class UserService:
    """User creation on top of the persistence gateway"""

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    def create_user(self, email: str) -> User:
        """Store a user; the store's own error text is passed on to the client"""
        try:
            return self.gateway.create_user(email)
        except StoreError as e:
            raise StoreError(f"Couldn't create user: {e.message}") from e
