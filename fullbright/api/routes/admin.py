"""Admin panel: HTML user table plus JSON listing, ban and role endpoints.

Every route here depends on require_admin, so a wrong or missing secret is a 403.
"""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from fullbright.api.dependencies import require_admin
from fullbright.core.database import get_db
from fullbright.schemas.admin import BanRequest, RoleRequest, UserRecord
from fullbright.services import admin as admin_service

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

# Jinja2Templates enables autoescaping, so usernames/hwids/roles render as text.
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_class=HTMLResponse)
def admin_page(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> HTMLResponse:
    """Server-rendered table of all users with ban/role actions."""
    users = [UserRecord.model_validate(u) for u in admin_service.list_users(db)]
    return templates.TemplateResponse(request, "admin.html", {"users": users})


@router.get("/api/users", response_model=list[UserRecord])
def list_users(db: Annotated[Session, Depends(get_db)]) -> list[UserRecord]:
    """All users ordered by id. No pagination."""
    return [UserRecord.model_validate(u) for u in admin_service.list_users(db)]


@router.post("/api/ban", response_model=UserRecord)
def ban_user(
    body: BanRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserRecord:
    """Set the banned flag, or flip it when 'banned' is omitted."""
    user = admin_service.get_user(db, username=body.username, user_id=body.id)
    user = admin_service.set_ban(db, user, banned=body.banned)
    return UserRecord.model_validate(user)


@router.post("/api/role", response_model=UserRecord)
def set_role(
    body: RoleRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserRecord:
    """Overwrite the user's role (e.g. promote to VIP)."""
    user = admin_service.get_user(db, username=body.username, user_id=body.id)
    user = admin_service.set_role(db, user, body.role)
    return UserRecord.model_validate(user)
