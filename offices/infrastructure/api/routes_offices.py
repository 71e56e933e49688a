"""Office endpoints — CRUD, status toggle and photo URL."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from offices.application.dtos.office import OfficeDto, OfficeRequest
from offices.application.services.office_service import OfficeService
from offices.domain.value_objects.photo_upload import PhotoUpload
from offices.infrastructure.api.dependencies import get_office_service

router = APIRouter(prefix="/offices", tags=["offices"])


@router.get("")
async def list_offices(service: OfficeService = Depends(get_office_service)):
    """List all offices (empty list when there are none)."""
    offices = await service.get_all_offices()
    return [_serialize_office(o) for o in offices]


@router.get("/office/{office_id}")
async def get_office(office_id: UUID, service: OfficeService = Depends(get_office_service)):
    office = await service.get_office_by_id(office_id)
    return _serialize_office(office)


@router.get("/{office_id}/picture")
async def get_office_picture(
    office_id: UUID, service: OfficeService = Depends(get_office_service)
):
    """Return the URL of the office photo."""
    url = await service.get_office_picture_url(office_id)
    return {"url": url}


@router.post("/office", status_code=status.HTTP_201_CREATED)
async def create_office(
    address: str | None = Form(None),
    registry_phone_number: str | None = Form(None, alias="registryPhoneNumber"),
    is_active: bool | None = Form(None, alias="isActive"),
    photo: UploadFile | None = File(None),
    service: OfficeService = Depends(get_office_service),
):
    """Create an office from a multipart form with an optional photo.

    Valid phone number formats: "+375 25-710-33-51", "+1 555-123-4567",
    "555-123-4567", "(555) 123-4567", "+44 20 1234 5678".
    """
    with _build_request(address, registry_phone_number, is_active, photo) as request:
        office = await service.add_office(request)
    return _serialize_office(office)


@router.put("/office/{office_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_office(
    office_id: UUID,
    address: str | None = Form(None),
    registry_phone_number: str | None = Form(None, alias="registryPhoneNumber"),
    is_active: bool | None = Form(None, alias="isActive"),
    photo: UploadFile | None = File(None),
    service: OfficeService = Depends(get_office_service),
):
    with _build_request(address, registry_phone_number, is_active, photo) as request:
        await service.update_office(office_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/office/{office_id}/status", status_code=status.HTTP_204_NO_CONTENT)
async def update_office_status(
    office_id: UUID,
    is_active: bool = Query(..., alias="isActive"),
    service: OfficeService = Depends(get_office_service),
):
    await service.update_office_status(office_id, is_active)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/office/{office_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_office(office_id: UUID, service: OfficeService = Depends(get_office_service)):
    await service.delete_office(office_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _build_request(
    address: str | None,
    registry_phone_number: str | None,
    is_active: bool | None,
    photo: UploadFile | None,
) -> OfficeRequest:
    """Hand the upload stream over to an OfficeRequest, which closes it when done."""
    upload = None
    # Browsers send an empty file part when no file was chosen.
    if photo is not None and photo.filename:
        upload = PhotoUpload(
            stream=photo.file,
            content_type=photo.content_type or "application/octet-stream",
            filename=photo.filename,
        )
    return OfficeRequest(
        address=address,
        registry_phone_number=registry_phone_number,
        is_active=is_active,
        photo=upload,
    )


def _serialize_office(o: OfficeDto) -> dict:
    return {
        "officeId": str(o.office_id),
        "address": o.address,
        "registryPhoneNumber": o.registry_phone_number,
        "photoId": o.photo_id,
        "isActive": o.is_active,
    }
