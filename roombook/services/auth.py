import logging
from typing import Any, Dict, Optional

from fastapi import Request
from passlib.context import CryptContext
from pymongo.asynchronous.database import AsyncDatabase

from roombook.constants import SESSION_USER_KEY, USERS_COLLECTION
from roombook.enums import UserRole
from roombook.exceptions import ValidationErrorsException
from roombook.models import User
from roombook.schemas.auth import SignUpForm
from roombook.services.validator import Validator
from roombook.settings import settings


logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


async def authenticate(username: str, password: str) -> Optional[User]:
    user = await User.find_one(User.username == username)
    if user is None or not verify_password(password, user.password_hash):
        return None

    return user


async def validate_sign_up_form(database: AsyncDatabase[Any], form: SignUpForm) -> Validator:
    validator = Validator(database)

    username_valid = validator.check(
        "alphanumeric", form.username, "Username", True, max=settings.MAX_USERNAME
    )
    validator.check(
        "textnum", form.password, "Passwort", True, min=settings.MIN_PASSWORD_LENGTH
    )
    validator.compare(
        (form.password, "Passwort"), (form.password_repeat, "Passwort wiederholen")
    )
    validator.check("checkbox", form.terms, "Nutzungsbedingungen", True)

    if username_valid:
        await validator.unique(form.username, "Username", USERS_COLLECTION, "username")

    return validator


async def register_user(database: AsyncDatabase[Any], form: SignUpForm) -> User:
    validator = await validate_sign_up_form(database, form)
    if validator.has_errors():
        logger.info("Sign-up form rejected with %d errors", len(validator.get_errors()))
        raise ValidationErrorsException(validator.get_errors())

    user = User(
        username=form.username,
        password_hash=hash_password(form.password),
        role=UserRole.USER,
    )
    await user.insert()
    logger.info("User %s registered", user.id)

    return user


def login_session(request: Request, user: User) -> None:
    request.session[SESSION_USER_KEY] = {
        "id": str(user.id),
        "username": user.username,
        "role": user.role.value,
    }
    logger.info("User %s logged in", user.id)


def logout_session(request: Request) -> None:
    user = request.session.pop(SESSION_USER_KEY, None)
    if user:
        logger.info("User %s logged out", user["id"])


def get_session_user(request: Request) -> Optional[Dict[str, str]]:
    return request.session.get(SESSION_USER_KEY)


def is_logged_in(request: Request) -> bool:
    return get_session_user(request) is not None


def is_admin(request: Request) -> bool:
    user = get_session_user(request)
    return user is not None and user.get("role") == UserRole.ADMIN.value


async def ensure_admin() -> None:
    """Create the configured admin account on start-up if it does not exist yet."""
    if not settings.ADMIN_USERNAME or settings.ADMIN_PASSWORD is None:
        return

    existing = await User.find_one(User.username == settings.ADMIN_USERNAME)
    if existing:
        return

    admin = User(
        username=settings.ADMIN_USERNAME,
        password_hash=hash_password(settings.ADMIN_PASSWORD.get_secret_value()),
        role=UserRole.ADMIN,
    )
    await admin.insert()
    logger.info("Admin account %s created", admin.username)
