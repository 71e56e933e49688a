"""Application configuration via Pydantic Settings.

NOTE: We explicitly map common .env variable names (MONGO_URL, S3_BUCKET,
etc.) to avoid silent misconfiguration.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # MongoDB
    mongo_url: str = Field(
        default="mongodb://localhost:27017",
        validation_alias="MONGO_URL",
    )
    mongo_database: str = Field(default="offices_db", validation_alias="MONGO_DATABASE")
    offices_collection: str = Field(default="offices", validation_alias="OFFICES_COLLECTION")

    # Object storage (S3 / MinIO)
    s3_endpoint_url: str | None = Field(default=None, validation_alias="S3_ENDPOINT_URL")
    s3_public_url: str | None = Field(default=None, validation_alias="S3_PUBLIC_URL")
    s3_region: str = Field(default="us-east-1", validation_alias="S3_REGION")
    s3_access_key: str | None = Field(default=None, validation_alias="S3_ACCESS_KEY")
    s3_secret_key: str | None = Field(default=None, validation_alias="S3_SECRET_KEY")
    s3_bucket: str = Field(default="officephotos", validation_alias="S3_BUCKET")

    # App
    cors_origins: list[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("mongo_url")
    @classmethod
    def _mongo_url_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Connection string for mongo db is not configured")
        return v

    @field_validator("s3_bucket")
    @classmethod
    def _bucket_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("The bucket name for the blob storage can't be null or empty")
        return v


settings = Settings()
