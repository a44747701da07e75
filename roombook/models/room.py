from typing import Annotated, List, Optional
from beanie import Document, Indexed

from roombook.constants import ROOMS_COLLECTION
from .timestamps import SoftDeleteMixin, TimestampMixin


class Room(Document, TimestampMixin, SoftDeleteMixin):
    name: str
    location: Optional[str] = None
    room_nr: Annotated[str, Indexed()]
    images: List[str] = []

    def has_images(self) -> bool:
        return bool(self.images)

    def get_images(self) -> List[str]:
        return list(self.images)

    class Settings:
        name = ROOMS_COLLECTION
        use_state_management = True
