"""Request dependencies shared by the routers (settings, client address, admin gate)."""

from typing import Annotated

from fastapi import Depends, Header, Query, Request

from fullbright.core.config import Settings
from fullbright.services.admin import check_admin_secret


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_client_ip(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str | None:
    """Client address; first X-Forwarded-For hop when TRUST_PROXY_HEADERS is on."""
    if settings.TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("x-forwarded-for", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first[:64]
    if request.client is None:
        return None
    return request.client.host[:64]


def require_admin(
    settings: Annotated[Settings, Depends(get_app_settings)],
    pass_query: Annotated[str | None, Query(alias="pass")] = None,
    pass_header: Annotated[str | None, Header(alias="x-admin-pass")] = None,
) -> None:
    """Dependency: admin secret from ?pass= or the x-admin-pass header. Raises 403 on mismatch."""
    supplied = pass_header if pass_header is not None else pass_query
    check_admin_secret(supplied, settings)
