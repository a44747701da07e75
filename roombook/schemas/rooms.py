from typing import Any, Mapping
from pydantic import BaseModel, field_validator


class RoomForm(BaseModel):
    """Raw room form input, checked by the validator and not by pydantic."""

    name: str = ""
    location: str = ""
    room_nr: str = ""

    @field_validator("name", "location", "room_nr", mode="before")
    def strip_whitespace(cls: "RoomForm", v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "RoomForm":
        return cls(
            name=form.get("name") or "",
            location=form.get("location") or "",
            room_nr=form.get("room_nr") or "",
        )
