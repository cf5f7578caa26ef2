"""
Business logic for Chirpy.

Services receive the persistence gateway by injection (see dependencies.py).
"""

from .chirp_service import ChirpService
from .user_service import UserService
from .admin_service import AdminService

__all__ = ["ChirpService", "UserService", "AdminService"]
