"""Chirpy - a small API server for short posts ("chirps")."""

__version__ = "1.0.0"
