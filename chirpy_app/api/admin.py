from fastapi import APIRouter, Depends, status

from chirpy_app.api.responses import respond_with_html, respond_with_text
from chirpy_app.dependencies import get_admin_service, get_api_config
from chirpy_app.metrics.api_config import ApiConfig
from chirpy_app.services.admin_service import AdminService, render_metrics

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/metrics")
def metrics(api_config: ApiConfig = Depends(get_api_config)):
    """HTML page with the number of file server hits"""
    return respond_with_html(status.HTTP_200_OK, render_metrics(api_config))


@router.post("/reset")
def reset(admin_service: AdminService = Depends(get_admin_service)):
    """
    Zero the hit counter and, on the dev platform, delete all chirps and users.

    Outside dev this answers 403, but the counter has already been zeroed.
    """
    message = admin_service.reset()
    return respond_with_text(status.HTTP_200_OK, message)
