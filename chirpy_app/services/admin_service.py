from chirpy_app.errors import ForbiddenError, StoreError
from chirpy_app.metrics.api_config import ApiConfig
from chirpy_app.storage.strategies import PersistenceGateway

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""

RESET_MESSAGE = "Hits reset to 0 and database reset to initial state."


def render_metrics(api_config: ApiConfig) -> str:
    """Admin page with the current file server hit count"""
    return METRICS_TEMPLATE.format(hits=api_config.file_server_hits.load())


class AdminService:
    """
    Admin reset.

    Reset always zeroes the hit counter first, even when the platform
    forbids purging the database.
    """

    def __init__(self, api_config: ApiConfig, gateway: PersistenceGateway):
        self.api_config = api_config
        self.gateway = gateway

    def reset(self) -> str:
        """
        Zero the counter; on the dev platform also delete chirps, then users.

        Deletion is sequential with no compensation: if deleting users fails
        the chirps are already gone.

        Raises:
            ForbiddenError: platform is not dev (counter is still zeroed)
            StoreError: a delete failed
        """
        self.api_config.file_server_hits.store(0)

        if not self.api_config.is_dev:
            raise ForbiddenError("Reset is only allowed in dev environment.")

        try:
            # Chirps reference users, so they go first
            self.gateway.delete_chirps()
            self.gateway.delete_users()
        except StoreError as e:
            raise StoreError("Couldn't reset database") from e

        print("🧹 Database reset to initial state")
        return RESET_MESSAGE
