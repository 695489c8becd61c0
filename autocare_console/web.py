"""
Helpers shared by the page routers: templates, banners and dependencies.
"""
from pathlib import Path
from typing import Optional

from fastapi import HTTPException, Request
from fastapi.templating import Jinja2Templates
from starlette import status
from starlette.responses import RedirectResponse

from autocare_console.api_client import ApiClient
from autocare_console.csrf import get_csrf_token
from autocare_console.schemas.user import ConsoleUser
from autocare_console.tokens import get_user_from_token

BASE_DIR = Path(__file__).resolve().parent
TOKEN_SESSION_KEY = "token"
FLASH_SESSION_KEY = "flash"

templates = Jinja2Templates(directory=BASE_DIR / "templates")


def flash(request: Request, message: str, kind: str = "success") -> None:
    """Queue a banner for the next rendered page."""
    request.session[FLASH_SESSION_KEY] = {"kind": kind, "message": message}


def pop_flash(request: Request) -> Optional[dict]:
    return request.session.pop(FLASH_SESSION_KEY, None)


def render(request: Request, template: str, context: Optional[dict] = None, status_code: int = 200):
    page = {
        "request": request,
        "flash": pop_flash(request),
        "csrf_token": get_csrf_token(request),
        "user": get_user_from_token(request.session.get(TOKEN_SESSION_KEY)),
    }
    page.update(context or {})
    return templates.TemplateResponse(request, template, page, status_code=status_code)


def redirect(request: Request, route_name: str, **path_params) -> RedirectResponse:
    return RedirectResponse(
        url=str(request.url_for(route_name, **path_params)),
        status_code=status.HTTP_303_SEE_OTHER,
    )


def require_user(request: Request) -> ConsoleUser:
    """Signed-in user, or a redirect to the sign-in page."""
    user = get_user_from_token(request.session.get(TOKEN_SESSION_KEY))
    if not user.is_authenticated:
        request.session.pop(TOKEN_SESSION_KEY, None)
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            headers={"Location": str(request.url_for("sign_in_form"))},
        )
    return user


def get_api_client(request: Request) -> ApiClient:
    """Client bound to the signed-in user's token."""
    return ApiClient(
        token=request.session.get(TOKEN_SESSION_KEY),
        session=request.app.state.http,
    )
