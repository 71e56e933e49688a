"""Health check endpoint."""

from fastapi import APIRouter, Depends
from pymongo import AsyncMongoClient

from offices.adapters.storage.s3_blob_storage import S3BlobStorage
from offices.infrastructure.api.dependencies import get_blob_storage, get_mongo_client

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    client: AsyncMongoClient = Depends(get_mongo_client),
    storage: S3BlobStorage = Depends(get_blob_storage),
):
    """Check API, database and photo storage connectivity."""
    try:
        await client.admin.command("ping")
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {e}"

    try:
        await storage.ping()
        storage_status = "connected"
    except Exception as e:
        storage_status = f"error: {e}"

    healthy = db_status == "connected" and storage_status == "connected"
    return {
        "status": "ok" if healthy else "degraded",
        "database": db_status,
        "storage": storage_status,
        "service": "Offices API",
    }
