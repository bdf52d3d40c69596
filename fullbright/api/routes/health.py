"""Health probe with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fullbright.api.dependencies import get_app_settings
from fullbright.core.config import Settings
from fullbright.core.database import check_db_connected, get_db
from fullbright.schemas.health import PingResponse

router = APIRouter()


@router.get("/ping", response_model=PingResponse)
def ping(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> PingResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring; always 200 while the process is up.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return PingResponse(environment=settings.APP_ENV, database=db_status)
