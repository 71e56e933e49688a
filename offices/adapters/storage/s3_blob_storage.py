"""S3-compatible photo storage (AWS S3, MinIO) — implements BlobStoragePort."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, BinaryIO
from urllib.parse import quote, unquote

import boto3
from botocore.exceptions import ClientError

from offices.application.ports.blob_storage_port import BlobStoragePort
from offices.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# Object-level misses only. A missing bucket is an infrastructure failure.
_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def _error_code(error: ClientError) -> str | None:
    return error.response.get("Error", {}).get("Code")


def _is_not_found(error: ClientError) -> bool:
    return _error_code(error) in _NOT_FOUND_CODES


class S3BlobStorage(BlobStoragePort):
    """Office photos stored as objects in a single bucket.

    Uses boto3 (sync) via asyncio.to_thread for the async port. Blob URLs
    are path-style: ``{public or endpoint url}/{bucket}/{name}``, or the
    virtual-hosted AWS URL when no endpoint is configured.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        public_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        client: Any = None,
    ) -> None:
        self.bucket = bucket
        self.region = region
        if client is None:
            extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
            client = boto3.client(
                "s3",
                region_name=region,
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
                **extra,
            )
        self._client = client

        root = public_url or endpoint_url
        if root:
            self.base_url = f"{root.rstrip('/')}/{bucket}"
        else:
            self.base_url = f"https://{bucket}.s3.{region}.amazonaws.com"

    def url_for(self, blob_name: str) -> str:
        return f"{self.base_url}/{quote(blob_name)}"

    def name_for(self, blob_ref: str) -> str:
        """Accept either a bare blob name or a URL produced by ``url_for``."""
        prefix = f"{self.base_url}/"
        if blob_ref.startswith(prefix):
            return unquote(blob_ref[len(prefix):])
        if blob_ref.startswith(("http://", "https://")):
            logger.warning(
                "Blob reference %s does not match the storage URL %s; using it as the key",
                blob_ref,
                self.base_url,
            )
        return blob_ref

    async def ensure_container(self) -> None:
        def _ensure() -> None:
            try:
                self._client.head_bucket(Bucket=self.bucket)
                return
            except ClientError as e:
                if not (_is_not_found(e) or _error_code(e) == "NoSuchBucket"):
                    raise

            params: dict[str, Any] = {"Bucket": self.bucket}
            if self.region != "us-east-1":
                params["CreateBucketConfiguration"] = {"LocationConstraint": self.region}
            try:
                self._client.create_bucket(**params)
                logger.info("Bucket %s created", self.bucket)
            except ClientError as e:
                if _error_code(e) != "BucketAlreadyOwnedByYou":
                    raise

        await asyncio.to_thread(_ensure)

    async def upload(self, content: BinaryIO, content_type: str, blob_name: str) -> str:
        logger.info("Uploading blob %s to bucket %s", blob_name, self.bucket)
        await asyncio.to_thread(
            self._client.put_object,
            Bucket=self.bucket,
            Key=blob_name,
            Body=content,
            ContentType=content_type,
        )
        return self.url_for(blob_name)

    async def delete(self, blob_ref: str) -> None:
        blob_name = self.name_for(blob_ref)
        logger.info("Attempting to delete blob with name: %s", blob_name)
        try:
            await asyncio.to_thread(
                self._client.delete_object, Bucket=self.bucket, Key=blob_name
            )
        except ClientError as e:
            if _is_not_found(e):
                logger.error("A problem occurred while deleting blob %s: %s", blob_name, e)
                raise NotFoundError("This image does not exist") from e
            raise

    async def get_url(self, blob_ref: str) -> str:
        blob_name = self.name_for(blob_ref)
        try:
            await asyncio.to_thread(
                self._client.head_object, Bucket=self.bucket, Key=blob_name
            )
        except ClientError as e:
            if _is_not_found(e):
                logger.error("The file with the name: %s does not exist", blob_name)
                raise NotFoundError(f"The file with the url: {blob_ref} does not exist") from e
            raise
        return self.url_for(blob_name)

    async def ping(self) -> None:
        await asyncio.to_thread(self._client.head_bucket, Bucket=self.bucket)
