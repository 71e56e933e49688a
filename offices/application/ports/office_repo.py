"""Port interface for office persistence."""

from abc import ABC, abstractmethod
from uuid import UUID

from offices.domain.entities.office import Office


class OfficeRepository(ABC):
    @abstractmethod
    async def add(self, office: Office) -> Office:
        ...

    @abstractmethod
    async def get_by_id(self, office_id: UUID) -> Office | None:
        """Return the office, or None when no document has this id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Office]:
        ...

    @abstractmethod
    async def replace(self, office_id: UUID, office: Office) -> None:
        ...

    @abstractmethod
    async def update_status(self, office_id: UUID, is_active: bool) -> None:
        """Set only the active flag of the office."""
        ...

    @abstractmethod
    async def delete(self, office_id: UUID) -> None:
        ...
