import logging

from fastapi import APIRouter, HTTPException, Query, Request, Response
from fastapi.responses import RedirectResponse

from roombook.services.redirector import count_click, get_click_counts, is_redirect_allowed
from roombook.services.templates import templates


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/redirect", tags=["redirector"])


@router.get("", name="redirector.redirect")
async def redirect(request: Request, url: str = Query(...)) -> Response:
    if not is_redirect_allowed(url):
        raise HTTPException(status_code=400, detail="Redirect target not allowed")

    clicks = count_click(request.session, url)
    logger.info("Redirecting to %s (click %d in this session)", url, clicks)

    return RedirectResponse(url, status_code=302)


@router.get("/stats", name="redirector.stats")
async def stats(request: Request) -> Response:
    counts = sorted(get_click_counts(request.session).items(), key=lambda i: -i[1])
    return templates.TemplateResponse(request, "redirector/stats.html", {"counts": counts})
