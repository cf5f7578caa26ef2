from typing import List

from fastapi import APIRouter, Depends, status

from chirpy_app.dependencies import get_chirp_service
from chirpy_app.schemas.chirp import ChirpCreate, ChirpResponse
from chirpy_app.services.chirp_service import ChirpService

router = APIRouter(prefix="/chirps", tags=["chirps"])


@router.post("", response_model=ChirpResponse, status_code=status.HTTP_201_CREATED)
def create_chirp(
    chirp_data: ChirpCreate,
    chirp_service: ChirpService = Depends(get_chirp_service)
):
    """Create a chirp (400 if too long, banned words masked)"""
    return chirp_service.create_chirp(chirp_data.body, chirp_data.user_id)


@router.get("", response_model=List[ChirpResponse])
def list_chirps(chirp_service: ChirpService = Depends(get_chirp_service)):
    """List all chirps, oldest first"""
    return chirp_service.list_chirps()


@router.get("/", response_model=ChirpResponse, include_in_schema=False)
def get_chirp_without_id(chirp_service: ChirpService = Depends(get_chirp_service)):
    # Without this, /chirps/ would redirect to the list route
    return chirp_service.get_chirp("")


@router.get("/{chirp_id}", response_model=ChirpResponse)
def get_chirp(
    chirp_id: str,
    chirp_service: ChirpService = Depends(get_chirp_service)
):
    # chirp_id stays a str so a bad UUID is our 400, not a validation error
    return chirp_service.get_chirp(chirp_id)
