from pathlib import Path
from typing import Any, Dict

from fastapi import Request
from fastapi.templating import Jinja2Templates

from roombook.constants import SESSION_FLASH_KEY
from roombook.services.auth import get_session_user, is_admin, is_logged_in
from roombook.settings import settings


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def flash(request: Request, message: str) -> None:
    request.session.setdefault(SESSION_FLASH_KEY, []).append(message)


def pop_flashes(request: Request) -> list[str]:
    return request.session.pop(SESSION_FLASH_KEY, [])


def template_globals(request: Request) -> Dict[str, Any]:
    return {
        "app_title": settings.APP_TITLE,
        "current_user": get_session_user(request),
        "is_logged_in": is_logged_in(request),
        "is_admin": is_admin(request),
        "flashes": pop_flashes(request),
    }


templates = Jinja2Templates(directory=TEMPLATES_DIR, context_processors=[template_globals])
