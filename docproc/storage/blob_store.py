"""S3-compatible object storage for uploaded files (MinIO in deployment)."""

from typing import Any

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from docproc.config.settings import Settings
from docproc.logging.logger import Log
from docproc.processor.exceptions import StorageError


class BlobStore:
    """Get/put of whole objects by path inside one bucket."""

    def __init__(self, client: Any, bucket: str) -> None:
        self._client = client
        self._bucket = bucket

    @classmethod
    def from_settings(cls, settings: Settings) -> "BlobStore":
        scheme = "https" if settings.minio_use_ssl else "http"
        client = boto3.client(
            "s3",
            endpoint_url=f"{scheme}://{settings.minio_endpoint}",
            aws_access_key_id=settings.minio_access_key,
            aws_secret_access_key=settings.minio_secret_key,
            region_name=settings.minio_region,
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )
        return cls(client, settings.minio_bucket)

    def get(self, path: str) -> bytes:
        """Download an object.

        Raises:
            StorageError: if the object is missing or the store is unreachable.
        """
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=path)
            body = response["Body"]
            try:
                return body.read()
            finally:
                body.close()
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Failed to download '{path}': {exc}") from exc

    def put(self, path: str, data: bytes, content_type: str) -> None:
        """Upload an object, replacing any existing one at ``path``.

        Raises:
            StorageError: if the upload fails.
        """
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=path,
                Body=data,
                ContentLength=len(data),
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"Failed to upload '{path}': {exc}") from exc
        Log.info("File uploaded to blob store", path=path, size=len(data))
