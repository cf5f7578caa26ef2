"""
FastAPI dependencies for dependency injection.

Routes depend on services; services depend on the persistence gateway;
the gateway depends on the per-request database session.
The ApiConfig (hit counter + platform flag) lives on app.state and is
handed out by get_api_config, so nothing here is a module global.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from chirpy_app.database.connection import get_db
from chirpy_app.metrics.api_config import ApiConfig
from chirpy_app.services.admin_service import AdminService
from chirpy_app.services.chirp_service import ChirpService
from chirpy_app.services.user_service import UserService
from chirpy_app.storage.strategies import PersistenceGateway, SQLAlchemyGateway


def get_api_config(request: Request) -> ApiConfig:
    """ApiConfig created by create_app() for this application"""
    return request.app.state.api_config


def get_gateway(db: Session = Depends(get_db)) -> PersistenceGateway:
    return SQLAlchemyGateway(db)


def get_chirp_service(
    api_config: ApiConfig = Depends(get_api_config),
    gateway: PersistenceGateway = Depends(get_gateway)
) -> ChirpService:
    return ChirpService(gateway, max_length=api_config.max_chirp_length)


def get_user_service(gateway: PersistenceGateway = Depends(get_gateway)) -> UserService:
    return UserService(gateway)


def get_admin_service(
    api_config: ApiConfig = Depends(get_api_config),
    gateway: PersistenceGateway = Depends(get_gateway)
) -> AdminService:
    return AdminService(api_config=api_config, gateway=gateway)
