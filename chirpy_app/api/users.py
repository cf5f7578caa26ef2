from fastapi import APIRouter, Depends, status

from chirpy_app.dependencies import get_user_service
from chirpy_app.schemas.user import UserCreate, UserResponse
from chirpy_app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """Create a user"""
    return user_service.create_user(user_data.email)
