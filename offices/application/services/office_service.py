"""OfficeService — validation, persistence and photo storage for offices."""

from __future__ import annotations

import dataclasses
import logging
import uuid
from uuid import UUID

from offices.application.dtos.office import OfficeDto, OfficeRequest
from offices.application.mappers import merge_request, to_dto, to_entity
from offices.application.ports.blob_storage_port import BlobStoragePort
from offices.application.ports.office_repo import OfficeRepository
from offices.domain.entities.office import Office
from offices.domain.exceptions import NotFoundError, ValidationError
from offices.domain.policies.office_rules import check_office_fields
from offices.domain.policies.photo_naming import new_upload_id, photo_blob_name
from offices.domain.value_objects.photo_upload import PhotoUpload

logger = logging.getLogger(__name__)


class OfficeService:
    """Orchestrates office CRUD across the document store and the blob store.

    Every operation runs its I/O strictly in sequence. There is no rollback:
    if the document write fails after a photo upload, the uploaded blob is
    left behind.
    """

    def __init__(self, office_repo: OfficeRepository, blob_storage: BlobStoragePort):
        self._offices = office_repo
        self._blobs = blob_storage

    async def add_office(self, request: OfficeRequest) -> OfficeDto:
        """Validate the request, upload the optional photo, insert the office.

        Raises:
            ValidationError: if any field rule fails. Nothing is written.
        """
        self._validate(request)

        office_id = uuid.uuid4()
        office = to_entity(request, office_id)
        if request.photo is not None:
            office.photo_id = await self._upload_photo(office_id, request.photo)

        await self._offices.add(office)
        logger.info("Office %s created", office_id)
        return to_dto(office)

    async def get_all_offices(self) -> list[OfficeDto]:
        offices = await self._offices.get_all()
        return [to_dto(o) for o in offices]

    async def get_office_by_id(self, office_id: UUID) -> OfficeDto:
        office = await self._get_existing(office_id)
        return to_dto(office)

    async def get_office_picture_url(self, office_id: UUID) -> str:
        """Resolve the current URL of the office photo.

        Raises:
            NotFoundError: if the office, its photo reference or the blob is missing.
        """
        office = await self._get_existing(office_id)
        if not office.has_photo():
            logger.error("The office with id: %s does not have a picture", office_id)
            raise NotFoundError(f"The office with id: {office_id} does not have a picture")

        return await self._blobs.get_url(office.photo_id)

    async def update_office(self, office_id: UUID, request: OfficeRequest) -> OfficeDto:
        """Replace the office fields; a new photo replaces the old blob.

        Raises:
            ValidationError: if any field rule fails. Nothing is written.
            NotFoundError: if the office does not exist.
        """
        self._validate(request)
        office = await self._get_existing(office_id)

        photo_id = None
        if request.photo is not None:
            if office.has_photo():
                await self._blobs.delete(office.photo_id)
                logger.info("The office picture %s was successfully deleted", office.photo_id)
            photo_id = await self._upload_photo(office_id, request.photo)

        merge_request(request, office, photo_id)
        await self._offices.replace(office_id, office)
        logger.info("Office %s updated", office_id)
        return to_dto(office)

    async def update_office_status(self, office_id: UUID, is_active: bool) -> OfficeDto:
        office = await self._get_existing(office_id)
        await self._offices.update_status(office_id, is_active)
        logger.info("Office %s status set to %s", office_id, is_active)
        return to_dto(dataclasses.replace(office, is_active=is_active))

    async def delete_office(self, office_id: UUID) -> OfficeDto:
        """Remove the office document and its photo blob, if any.

        Returns:
            The projection of the deleted office.
        """
        office = await self._get_existing(office_id)
        if office.has_photo():
            await self._blobs.delete(office.photo_id)
            logger.info("The office picture %s was successfully deleted", office.photo_id)

        await self._offices.delete(office_id)
        logger.info("Office %s deleted", office_id)
        return to_dto(office)

    # ─── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    def _validate(request: OfficeRequest) -> None:
        errors = check_office_fields(
            request.address, request.registry_phone_number, request.is_active
        )
        if errors:
            logger.warning("Validation failed: %s", [f"{e.field}: {e.message}" for e in errors])
            raise ValidationError(errors)

    async def _get_existing(self, office_id: UUID) -> Office:
        office = await self._offices.get_by_id(office_id)
        if office is None:
            logger.error("There is not any office with that id: %s", office_id)
            raise NotFoundError(f"There is not any office with this id: {office_id}")
        return office

    async def _upload_photo(self, office_id: UUID, photo: PhotoUpload) -> str:
        blob_name = photo_blob_name(office_id, photo.filename, new_upload_id())
        url = await self._blobs.upload(photo.stream, photo.content_type, blob_name)
        logger.info("%s uploaded successfully", blob_name)
        return url
