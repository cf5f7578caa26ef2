from typing import List, Optional
from uuid import UUID

from chirpy_app.errors import InvalidIdentifierError, NotFoundError, StoreError
from chirpy_app.models.chirp import Chirp
from chirpy_app.services.content_filter import clean_body
from chirpy_app.services.validation import validate_chirp_body
from chirpy_app.storage.strategies import PersistenceGateway


class ChirpService:
    """
    Chirp lifecycle: create, list, get by id.

    The gateway is injected, the service never touches the ORM session.
    Returns SQLAlchemy model instances - the response models serialize them.
    """

    def __init__(self, gateway: PersistenceGateway, max_length: Optional[int] = None):
        """
        Args:
            gateway: Persistence gateway for the current request
            max_length: Chirp length limit in bytes (settings value if None)
        """
        self.gateway = gateway
        self.max_length = max_length

    def create_chirp(self, body: str, user_id: UUID) -> Chirp:
        """
        Validate, mask and store a chirp.

        Process:
        1. Reject bodies over the length limit (nothing is stored)
        2. Mask banned words
        3. Persist through the gateway
        """
        validate_chirp_body(body, self.max_length)
        cleaned = clean_body(body)

        try:
            return self.gateway.create_chirp(cleaned, user_id)
        except StoreError as e:
            raise StoreError("Couldn't create chirp") from e

    def list_chirps(self) -> List[Chirp]:
        """
        Get every chirp, oldest first.

        An empty store is reported as a failure, not as an empty list.
        Existing clients depend on the 500 for this case.
        """
        try:
            chirps = self.gateway.get_chirps()
        except StoreError as e:
            raise StoreError("Couldn't retrieve chirps") from e

        if not chirps:
            raise StoreError("Couldn't retrieve chirps")
        return chirps

    def get_chirp(self, chirp_id: str) -> Chirp:
        """
        Get a single chirp from its path identifier.

        Raises:
            InvalidIdentifierError: chirp_id is not a UUID
            NotFoundError: no chirp with that id
        """
        try:
            parsed_id = UUID(chirp_id)
        except (ValueError, TypeError) as e:
            raise InvalidIdentifierError("Invalid chirp ID") from e

        chirp = self.gateway.get_chirp(parsed_id)
        if chirp is None:
            raise NotFoundError("Couldn't get chirp")
        return chirp
