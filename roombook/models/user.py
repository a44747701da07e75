from typing import Annotated
from beanie import Document, Indexed
from pydantic import Field

from roombook.constants import USERS_COLLECTION
from roombook.enums import UserRole
from .timestamps import TimestampMixin


class User(Document, TimestampMixin):
    username: Annotated[str, Indexed(unique=True)]

    password_hash: str = Field(exclude=True)
    role: UserRole = UserRole.USER

    class Settings:
        name = USERS_COLLECTION
        use_state_management = True
