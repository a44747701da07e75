from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import RedirectResponse
from pymongo.asynchronous.database import AsyncDatabase

from roombook.dependencies import get_db
from roombook.exceptions import ValidationErrorsException
from roombook.limiter import limiter
from roombook.schemas.auth import LoginForm, SignUpForm
from roombook.services.auth import (
    authenticate,
    login_session,
    logout_session,
    register_user,
)
from roombook.services.templates import flash, templates


router = APIRouter(tags=["auth"])


@router.get("/login", name="auth.login_form")
async def login_form(request: Request) -> Response:
    return templates.TemplateResponse(
        request, "auth/login.html", {"form": LoginForm(), "errors": []}
    )


@router.post("/login", name="auth.login")
@limiter.limit("5/minute")
async def login(request: Request, response: Response) -> Response:
    form = LoginForm.from_form(await request.form())

    user = await authenticate(form.username, form.password)
    if user is None:
        return templates.TemplateResponse(
            request,
            "auth/login.html",
            {"form": form, "errors": ["Username oder Passwort sind falsch."]},
            status_code=401,
        )

    login_session(request, user)
    flash(request, f"Willkommen zurück, {user.username}!")
    return RedirectResponse(request.url_for("rooms.index"), status_code=303)


@router.get("/sign-up", name="auth.sign_up_form")
async def sign_up_form(request: Request) -> Response:
    return templates.TemplateResponse(
        request, "auth/sign-up.html", {"form": SignUpForm(), "errors": []}
    )


@router.post("/sign-up", name="auth.sign_up")
@limiter.limit("5/minute")
async def sign_up(
    request: Request,
    response: Response,
    database: AsyncDatabase[Any] = Depends(get_db),
) -> Response:
    form = SignUpForm.from_form(await request.form())

    try:
        await register_user(database, form)
    except ValidationErrorsException as e:
        return templates.TemplateResponse(
            request,
            "auth/sign-up.html",
            {"form": form, "errors": e.errors},
            status_code=422,
        )

    flash(request, "Registrierung erfolgreich, bitte melde dich an.")
    return RedirectResponse(request.url_for("auth.login_form"), status_code=303)


@router.get("/logout", name="auth.logout")
async def logout(request: Request) -> Response:
    logout_session(request)
    return RedirectResponse(request.url_for("auth.login_form"), status_code=303)
