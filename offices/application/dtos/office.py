"""Office transfer objects — inbound request and outbound projection."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from offices.domain.value_objects.photo_upload import PhotoUpload


@dataclass(frozen=True)
class OfficeDto:
    """Read-only projection of an Office returned across the service boundary."""

    office_id: UUID
    address: str
    registry_phone_number: str
    photo_id: str | None
    is_active: bool


@dataclass
class OfficeRequest:
    """Data for creating or updating an office.

    The request owns the optional photo stream. Use it as a context manager
    (or call ``close``) so the stream is released on every exit path.
    """

    address: str | None
    registry_phone_number: str | None
    is_active: bool | None
    photo: PhotoUpload | None = None

    def close(self) -> None:
        if self.photo is not None:
            self.photo.close()

    def __enter__(self) -> OfficeRequest:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
