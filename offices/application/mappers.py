"""Mappers between Office entities and transfer objects."""

from __future__ import annotations

from uuid import UUID

from offices.application.dtos.office import OfficeDto, OfficeRequest
from offices.domain.entities.office import Office


def to_dto(office: Office) -> OfficeDto:
    return OfficeDto(
        office_id=office.id,
        address=office.address,
        registry_phone_number=office.registry_phone_number,
        photo_id=office.photo_id,
        is_active=office.is_active,
    )


def to_entity(request: OfficeRequest, office_id: UUID) -> Office:
    """Build a new Office from a validated request. The photo reference is set later."""
    return Office(
        id=office_id,
        address=request.address,
        registry_phone_number=request.registry_phone_number,
        is_active=request.is_active,
    )


def merge_request(request: OfficeRequest, office: Office, photo_id: str | None = None) -> Office:
    """Copy the mutable fields of a validated request onto an existing office.

    The identifier is never touched. ``photo_id`` replaces the stored photo
    reference only when given; otherwise the current reference is kept.
    """
    office.address = request.address
    office.registry_phone_number = request.registry_phone_number
    office.is_active = request.is_active
    if photo_id is not None:
        office.photo_id = photo_id
    return office
