import logging
from typing import Any, List, Optional, Tuple

from beanie import PydanticObjectId
from pymongo.asynchronous.database import AsyncDatabase

from roombook.constants import ROOMS_COLLECTION
from roombook.exceptions import ValidationErrorsException
from roombook.models import Room
from roombook.schemas.common_responses import PaginationMeta
from roombook.schemas.rooms import RoomForm
from roombook.services.validator import Validator
from roombook.settings import settings
from roombook.utils.paginate import paginate


logger = logging.getLogger(__name__)


def active_rooms_query() -> Any:
    return Room.find(Room.deleted_at == None).sort(+Room.room_nr)  # noqa: E711


async def list_rooms(page: int, page_size: int) -> Tuple[List[Room], PaginationMeta]:
    return await paginate(active_rooms_query(), page, page_size)


async def get_room(room_id: str) -> Optional[Room]:
    """Find a room that has not been deleted, ``None`` for bad or unknown ids."""
    try:
        object_id = PydanticObjectId(room_id)
    except Exception:
        return None

    room = await Room.get(object_id)
    if room is None or room.is_deleted:
        return None

    return room


async def validate_room_form(
    database: AsyncDatabase[Any], form: RoomForm, current: Optional[Room] = None
) -> Validator:
    validator = Validator(database)

    validator.check("textnum", form.name, "Name", True, max=settings.MAX_ROOM_NAME)
    validator.check(
        "textnum", form.location, "Location", False, max=settings.MAX_ROOM_LOCATION
    )
    room_nr_valid = validator.check(
        "alphanumeric", form.room_nr, "Raumnummer", True, max=settings.MAX_ROOM_NR
    )

    # the unique lookup only runs for a well-formed room number that changed
    if room_nr_valid and (current is None or current.room_nr != form.room_nr):
        await validator.unique(form.room_nr, "Raumnummer", ROOMS_COLLECTION, "room_nr")

    return validator


async def create_room(database: AsyncDatabase[Any], form: RoomForm) -> Room:
    validator = await validate_room_form(database, form)
    if validator.has_errors():
        logger.info("Room form rejected with %d errors", len(validator.get_errors()))
        raise ValidationErrorsException(validator.get_errors())

    room = Room(name=form.name, location=form.location or None, room_nr=form.room_nr)
    await room.insert()
    logger.info("Room %s created with number %s", room.id, room.room_nr)

    return room


async def update_room(database: AsyncDatabase[Any], room: Room, form: RoomForm) -> Room:
    validator = await validate_room_form(database, form, room)
    if validator.has_errors():
        logger.info(
            "Room %s form rejected with %d errors", room.id, len(validator.get_errors())
        )
        raise ValidationErrorsException(validator.get_errors())

    room.name = form.name
    room.location = form.location or None
    room.room_nr = form.room_nr
    await room.save()
    logger.info("Room %s updated", room.id)

    return room


async def delete_room(room: Room) -> None:
    await room.soft_delete()
    logger.info("Room %s deleted", room.id)
