from fastapi import APIRouter, Depends

from api.core.config import Settings
from api.deps.state import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health(app_settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ok", "service": app_settings.api_name, "version": app_settings.api_version}
