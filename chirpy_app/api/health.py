from fastapi import APIRouter, status

from chirpy_app.api.responses import respond_with_text

router = APIRouter(tags=["health"])


@router.get("/healthz")
def readiness():
    """Health check endpoint"""
    return respond_with_text(status.HTTP_200_OK, "OK")
