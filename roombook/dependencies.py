from typing import Any, Dict

from fastapi import HTTPException, Request
from pymongo.asynchronous.database import AsyncDatabase

from roombook.db.database import get_database
from roombook.services.auth import get_session_user, is_admin


def get_db() -> AsyncDatabase[Any]:
    return get_database()


def require_user(request: Request) -> Dict[str, str]:
    user = get_session_user(request)
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")

    return user


def require_admin(request: Request) -> Dict[str, str]:
    user = require_user(request)
    if not is_admin(request):
        raise HTTPException(status_code=403, detail="Forbidden")

    return user
