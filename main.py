import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles

from chirpy_app.config import Settings, settings
from chirpy_app.database.connection import (
    Base,
    SessionLocal,
    engine,
    check_connection,
    make_engine,
    make_session_factory,
)
from chirpy_app.api import admin, chirps, health, users
from chirpy_app.api.responses import chirpy_error_handler, decode_error_handler
from chirpy_app.errors import ChirpyError
from chirpy_app.metrics import ApiConfig, HitCountingMiddleware

# Import models to ensure they're registered with Base
from chirpy_app.models import User, Chirp


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: make sure the database answers and the tables exist.

    Any error here propagates and aborts startup.
    """
    check_connection(app.state.engine)
    Base.metadata.create_all(bind=app.state.engine)
    print("✅ Database ready")
    yield


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application.

    Everything request handling needs comes from app_settings:
    - the database engine and session factory (app.state), used by get_db
      and by the startup check
    - the ApiConfig (hit counter, platform flag, chirp length limit),
      threaded into the file server middleware and, via app.state, into
      the admin and chirp routes
    """
    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="Chirpy: short posts with profanity masking",
        debug=app_settings.debug,
        lifespan=lifespan
    )

    # The module-level engine already points at the configured database
    if app_settings.database_url == settings.database_url:
        app.state.engine = engine
        app.state.session_factory = SessionLocal
    else:
        app.state.engine = make_engine(app_settings.database_url)
        app.state.session_factory = make_session_factory(app.state.engine)

    api_config = ApiConfig(
        platform=app_settings.platform,
        max_chirp_length=app_settings.max_chirp_length
    )
    app.state.api_config = api_config

    ######## Error handlers
    app.add_exception_handler(ChirpyError, chirpy_error_handler)
    app.add_exception_handler(RequestValidationError, decode_error_handler)

    ######## Include routers
    app.include_router(health.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(chirps.router, prefix="/api")
    app.include_router(admin.router)

    ######## File server (the only hit-counted route)
    if not os.path.isdir(app_settings.static_dir):
        print(f"⚠️  Static directory not found: {app_settings.static_dir}")
    file_server = StaticFiles(directory=app_settings.static_dir, html=True, check_dir=False)
    app.mount("/app", HitCountingMiddleware(file_server, api_config.file_server_hits), name="app")

    return app


# Create FastAPI app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    print(f"Serving files from {settings.static_dir} on port: {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
