from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.sessions import SessionMiddleware

from roombook.db.database import connect, disconnect
from roombook.exceptions import (
    ValidatorConfigurationError,
    exception_handler,
    validator_configuration_exception_handler,
)
from roombook.limiter import limiter
from roombook.routes import api, auth, redirector, rooms
from roombook.services.auth import ensure_admin
from roombook.settings import settings
from roombook.utils.logger import configure_logging


STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    await connect()
    await ensure_admin()

    yield

    await disconnect()


configure_logging()

origins = settings.ALLOWED_ORIGINS.split(",") if settings.ALLOWED_ORIGINS else []

app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_TITLE,
    version=settings.APP_VERSION,
)

app.state.limiter = limiter

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET.get_secret_value(),
    session_cookie=settings.SESSION_COOKIE_NAME,
    max_age=settings.SESSION_MAX_AGE,
    https_only=settings.SESSION_HTTPS_ONLY,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Retry-After",
        "X-RateLimit-Reset",
        "X-RateLimit-Limit",
        "X-RateLimit-Remaining",
    ],
)

app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
app.add_exception_handler(
    ValidatorConfigurationError, validator_configuration_exception_handler
)
app.add_exception_handler(Exception, exception_handler)


@app.get("/", include_in_schema=False)
async def home(request: Request) -> Response:
    return RedirectResponse(request.url_for("rooms.index"))


app.include_router(api.router)
app.include_router(rooms.router)
app.include_router(auth.router)
app.include_router(redirector.router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
