"""
Database models for Chirpy.

Importing this package registers every table with Base.metadata.
"""

from .user import User
from .chirp import Chirp

__all__ = ["User", "Chirp"]
