from .user import UserCreate, UserResponse
from .chirp import ChirpCreate, ChirpResponse

__all__ = ["UserCreate", "UserResponse", "ChirpCreate", "ChirpResponse"]
