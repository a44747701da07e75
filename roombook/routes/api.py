from typing import Dict
from urllib.parse import urljoin
from fastapi import APIRouter, Request, Response

from roombook.settings import settings
from roombook.schemas.common_responses import DetailResponse
from roombook.limiter import limiter


router = APIRouter(prefix="/api")


@router.get("", response_model=Dict[str, str], tags=["root"])
@limiter.limit("10/minute")
def info(request: Request, response: Response) -> Dict[str, str]:
    return {
        "title": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "docs_url": urljoin(str(request.base_url), "/docs"),
    }


@router.get("/health", response_model=DetailResponse, tags=["root"])
@limiter.limit("10/minute")
def health_check(request: Request, response: Response) -> DetailResponse:
    return DetailResponse(detail="ok")
