from .connection import (
    Base,
    SessionLocal,
    engine,
    get_db,
    check_connection,
    make_engine,
    make_session_factory,
)

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "check_connection",
    "make_engine",
    "make_session_factory",
]
