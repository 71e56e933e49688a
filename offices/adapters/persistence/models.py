"""Office document layout — maps to the ``offices`` Mongo collection.

    {_id: UUID, address: str, registryPhoneNumber: str, photoId: str | None, isActive: bool}
"""

from __future__ import annotations

from typing import Any

from offices.domain.entities.office import Office

ID = "_id"
ADDRESS = "address"
REGISTRY_PHONE_NUMBER = "registryPhoneNumber"
PHOTO_ID = "photoId"
IS_ACTIVE = "isActive"


def office_to_document(office: Office) -> dict[str, Any]:
    return {
        ID: office.id,
        ADDRESS: office.address,
        REGISTRY_PHONE_NUMBER: office.registry_phone_number,
        PHOTO_ID: office.photo_id,
        IS_ACTIVE: office.is_active,
    }


def document_to_office(doc: dict[str, Any]) -> Office:
    return Office(
        id=doc[ID],
        address=doc[ADDRESS],
        registry_phone_number=doc[REGISTRY_PHONE_NUMBER],
        photo_id=doc.get(PHOTO_ID),
        is_active=bool(doc.get(IS_ACTIVE, False)),
    )
