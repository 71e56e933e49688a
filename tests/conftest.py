"""Pytest configuration, in-memory port fakes and shared fixtures."""

from __future__ import annotations

import dataclasses
import io

import pytest

from offices.application.dtos.office import OfficeRequest
from offices.application.ports.blob_storage_port import BlobStoragePort
from offices.application.ports.office_repo import OfficeRepository
from offices.application.services.office_service import OfficeService
from offices.domain.exceptions import NotFoundError
from offices.domain.value_objects.photo_upload import PhotoUpload

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeOfficeRepo(OfficeRepository):
    """Stores copies, so only explicit writes change what a later read returns."""

    def __init__(self, calls: list[str] | None = None):
        self.offices = {}
        self.calls = calls if calls is not None else []

    async def add(self, office):
        self.calls.append("repo.add")
        self.offices[office.id] = dataclasses.replace(office)
        return office

    async def get_by_id(self, office_id):
        self.calls.append("repo.get_by_id")
        office = self.offices.get(office_id)
        return dataclasses.replace(office) if office else None

    async def get_all(self):
        self.calls.append("repo.get_all")
        return [dataclasses.replace(o) for o in self.offices.values()]

    async def replace(self, office_id, office):
        self.calls.append("repo.replace")
        self.offices[office_id] = dataclasses.replace(office)

    async def update_status(self, office_id, is_active):
        self.calls.append("repo.update_status")
        self.offices[office_id].is_active = is_active

    async def delete(self, office_id):
        self.calls.append("repo.delete")
        self.offices.pop(office_id, None)


class FakeBlobStorage(BlobStoragePort):
    BASE_URL = "http://blobs.test/officephotos"

    def __init__(self, calls: list[str] | None = None):
        self.blobs: dict[str, tuple[bytes, str]] = {}
        self.calls = calls if calls is not None else []

    def _name(self, blob_ref):
        prefix = f"{self.BASE_URL}/"
        return blob_ref[len(prefix):] if blob_ref.startswith(prefix) else blob_ref

    async def ensure_container(self):
        self.calls.append("blob.ensure_container")

    async def upload(self, content, content_type, blob_name):
        self.calls.append(f"blob.upload:{blob_name}")
        self.blobs[blob_name] = (content.read(), content_type)
        return f"{self.BASE_URL}/{blob_name}"

    async def delete(self, blob_ref):
        name = self._name(blob_ref)
        self.calls.append(f"blob.delete:{name}")
        self.blobs.pop(name, None)

    async def get_url(self, blob_ref):
        name = self._name(blob_ref)
        self.calls.append(f"blob.get_url:{name}")
        if name not in self.blobs:
            raise NotFoundError(f"The file with the url: {blob_ref} does not exist")
        return f"{self.BASE_URL}/{name}"


# ─── Builders ────────────────────────────────────────────────────────


def _make_photo(data=b"\x89PNG fake", content_type="image/png", filename="front.png"):
    return PhotoUpload(stream=io.BytesIO(data), content_type=content_type, filename=filename)


def _make_request(
    address="Main St 1",
    phone="+1 555-123-4567",
    is_active=True,
    photo=None,
) -> OfficeRequest:
    return OfficeRequest(
        address=address,
        registry_phone_number=phone,
        is_active=is_active,
        photo=photo,
    )


# ─── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def calls():
    return []


@pytest.fixture
def office_repo(calls):
    return FakeOfficeRepo(calls)


@pytest.fixture
def blob_storage(calls):
    return FakeBlobStorage(calls)


@pytest.fixture
def service(office_repo, blob_storage):
    return OfficeService(office_repo=office_repo, blob_storage=blob_storage)


@pytest.fixture
def make_request():
    return _make_request


@pytest.fixture
def make_photo():
    return _make_photo
