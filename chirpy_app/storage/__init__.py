"""
Persistence gateway for users and chirps.

Implements the Strategy Pattern so services never depend on the ORM.
"""

from .strategies import PersistenceGateway, SQLAlchemyGateway

__all__ = [
    "PersistenceGateway",
    "SQLAlchemyGateway",
]
