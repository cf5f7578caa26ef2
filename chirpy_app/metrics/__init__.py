"""
File server hit counting.
"""

from .hit_counter import HitCounter
from .middleware import HitCountingMiddleware
from .api_config import ApiConfig, DEV_PLATFORM

__all__ = [
    "HitCounter",
    "HitCountingMiddleware",
    "ApiConfig",
    "DEV_PLATFORM",
]
