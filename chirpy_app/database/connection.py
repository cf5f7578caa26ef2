"""
Database engine, session factory and declarative base.

Every request gets its own session through the get_db() dependency.
"""

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from chirpy_app.config import settings


def _engine_kwargs(database_url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def make_engine(database_url: str) -> Engine:
    return create_engine(database_url, **_engine_kwargs(database_url))


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = make_engine(settings.database_url)
SessionLocal = make_session_factory(engine)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked per connection"""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def check_connection(bind: Engine = engine) -> None:
    """
    Run a trivial query against the database.

    Raises the driver error unchanged so startup fails loudly when the
    database is unreachable.
    """
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))


def get_db(request: Request):
    """
    Yield a session from the app's own session factory and close it
    when the request is done.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
