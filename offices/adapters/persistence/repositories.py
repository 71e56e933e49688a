"""MongoDB repository implementations."""

from __future__ import annotations

from uuid import UUID

from pymongo.asynchronous.collection import AsyncCollection

from offices.adapters.persistence.models import (
    ID,
    IS_ACTIVE,
    document_to_office,
    office_to_document,
)
from offices.application.ports.office_repo import OfficeRepository
from offices.domain.entities.office import Office


class MongoOfficeRepository(OfficeRepository):
    def __init__(self, collection: AsyncCollection):
        self._c = collection

    async def add(self, office: Office) -> Office:
        await self._c.insert_one(office_to_document(office))
        return office

    async def get_by_id(self, office_id: UUID) -> Office | None:
        doc = await self._c.find_one({ID: office_id})
        return document_to_office(doc) if doc else None

    async def get_all(self) -> list[Office]:
        docs = await self._c.find({}).to_list()
        return [document_to_office(d) for d in docs]

    async def replace(self, office_id: UUID, office: Office) -> None:
        await self._c.replace_one({ID: office_id}, office_to_document(office))

    async def update_status(self, office_id: UUID, is_active: bool) -> None:
        await self._c.update_one({ID: office_id}, {"$set": {IS_ACTIVE: is_active}})

    async def delete(self, office_id: UUID) -> None:
        await self._c.delete_one({ID: office_id})
