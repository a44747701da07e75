from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import RedirectResponse
from pymongo.asynchronous.database import AsyncDatabase

from roombook.dependencies import get_db, require_admin
from roombook.exceptions import ValidationErrorsException
from roombook.limiter import limiter
from roombook.models import Room
from roombook.schemas.rooms import RoomForm
from roombook.services.rooms import (
    create_room,
    delete_room,
    get_room,
    list_rooms,
    update_room,
)
from roombook.services.templates import flash, templates
from roombook.settings import settings


router = APIRouter(prefix="/rooms", tags=["rooms"])


async def get_room_or_404(room_id: str) -> Room:
    room = await get_room(room_id)
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")

    return room


def render_form(
    request: Request,
    form: RoomForm,
    room: Room | None = None,
    errors: list[str] | None = None,
    status_code: int = 200,
) -> Response:
    context: Dict[str, Any] = {"form": form, "room": room, "errors": errors or []}
    return templates.TemplateResponse(
        request, "rooms/form.html", context, status_code=status_code
    )


@router.get("", name="rooms.index")
@limiter.limit("30/minute")
async def index(
    request: Request, response: Response, page: int = Query(1, ge=1)
) -> Response:
    rooms, meta = await list_rooms(page, settings.ROOMS_PAGE_SIZE)
    return templates.TemplateResponse(
        request, "rooms/index.html", {"rooms": rooms, "meta": meta}
    )


@router.get("/create", name="rooms.create", dependencies=[Depends(require_admin)])
async def create(request: Request) -> Response:
    return render_form(request, RoomForm())


@router.post("", name="rooms.store", dependencies=[Depends(require_admin)])
@limiter.limit("10/minute")
async def store(
    request: Request,
    response: Response,
    database: AsyncDatabase[Any] = Depends(get_db),
) -> Response:
    form = RoomForm.from_form(await request.form())

    try:
        room = await create_room(database, form)
    except ValidationErrorsException as e:
        return render_form(request, form, errors=e.errors, status_code=422)

    flash(request, f"Raum {room.room_nr} wurde angelegt.")
    return RedirectResponse(request.url_for("rooms.index"), status_code=303)


@router.get("/{room_id}", name="rooms.edit", dependencies=[Depends(require_admin)])
async def edit(request: Request, room_id: str) -> Response:
    room = await get_room_or_404(room_id)
    form = RoomForm(name=room.name, location=room.location or "", room_nr=room.room_nr)
    return render_form(request, form, room)


@router.post("/{room_id}", name="rooms.update", dependencies=[Depends(require_admin)])
@limiter.limit("10/minute")
async def update(
    request: Request,
    response: Response,
    room_id: str,
    database: AsyncDatabase[Any] = Depends(get_db),
) -> Response:
    room = await get_room_or_404(room_id)
    form = RoomForm.from_form(await request.form())

    try:
        await update_room(database, room, form)
    except ValidationErrorsException as e:
        return render_form(request, form, room, errors=e.errors, status_code=422)

    flash(request, f"Raum {room.room_nr} wurde gespeichert.")
    return RedirectResponse(request.url_for("rooms.index"), status_code=303)


@router.get("/{room_id}/delete", name="rooms.delete", dependencies=[Depends(require_admin)])
async def delete(request: Request, room_id: str) -> Response:
    room = await get_room_or_404(room_id)
    await delete_room(room)

    flash(request, f"Raum {room.room_nr} wurde gelöscht.")
    return RedirectResponse(request.url_for("rooms.index"), status_code=303)
