"""Office entity — a clinic office with a registry desk and an optional photo."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Office:
    id: UUID
    address: str
    registry_phone_number: str
    is_active: bool
    photo_id: str | None = None

    def has_photo(self) -> bool:
        return bool(self.photo_id)
