from typing import Any, Mapping
from pydantic import BaseModel, field_validator


class LoginForm(BaseModel):
    username: str = ""
    password: str = ""

    @field_validator("username", mode="before")
    def strip_whitespace(cls: "LoginForm", v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "LoginForm":
        return cls(
            username=form.get("username") or "",
            password=form.get("password") or "",
        )


class SignUpForm(BaseModel):
    username: str = ""
    password: str = ""
    password_repeat: str = ""
    terms: str = ""

    @field_validator("username", mode="before")
    def strip_whitespace(cls: "SignUpForm", v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "SignUpForm":
        return cls(
            username=form.get("username") or "",
            password=form.get("password") or "",
            password_repeat=form.get("password_repeat") or "",
            terms=form.get("terms") or "",
        )
