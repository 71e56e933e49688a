"""FastAPI dependency injection — wires adapters into the office service."""

from __future__ import annotations

from fastapi import Depends, Request
from pymongo import AsyncMongoClient

from offices.adapters.persistence.database import get_offices_collection
from offices.adapters.persistence.repositories import MongoOfficeRepository
from offices.adapters.storage.s3_blob_storage import S3BlobStorage
from offices.application.services.office_service import OfficeService
from offices.config import settings

# Singleton adapter (boto3 clients are thread-safe)
_blob_storage = S3BlobStorage(
    bucket=settings.s3_bucket,
    region=settings.s3_region,
    endpoint_url=settings.s3_endpoint_url,
    public_url=settings.s3_public_url,
    access_key=settings.s3_access_key,
    secret_key=settings.s3_secret_key,
)


def get_blob_storage() -> S3BlobStorage:
    return _blob_storage


def get_mongo_client(request: Request) -> AsyncMongoClient:
    """Mongo client opened by the application lifespan."""
    return request.app.state.mongo_client


def get_office_repo(
    client: AsyncMongoClient = Depends(get_mongo_client),
) -> MongoOfficeRepository:
    return MongoOfficeRepository(get_offices_collection(client, settings))


def get_office_service(
    office_repo: MongoOfficeRepository = Depends(get_office_repo),
    blob_storage: S3BlobStorage = Depends(get_blob_storage),
) -> OfficeService:
    return OfficeService(office_repo=office_repo, blob_storage=blob_storage)
