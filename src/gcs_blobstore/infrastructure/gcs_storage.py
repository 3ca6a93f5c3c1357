"""Google Cloud Storage implementation of the BlobStore interface."""

import logging
import os
from typing import BinaryIO

from google.cloud import storage

from gcs_blobstore.config import BlobStoreConfig
from gcs_blobstore.domain import ObjectLocation, UploadRequest
from gcs_blobstore.exceptions import InvalidArgumentError, WriteFailedError
from gcs_blobstore.gcs import get_gcs_client
from gcs_blobstore.infrastructure.interfaces import BlobStore


class GcsBlobStore(BlobStore):
    """Reads and writes blobs in Google Cloud Storage."""

    def __init__(self, client: storage.Client, logger: logging.Logger | None = None):
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    def read_object_from_path(self, path: str) -> BinaryIO:
        location = ObjectLocation.from_path(path)
        return self.read_object(location.bucket_name, location.object_key)

    def read_object(self, bucket_name: str, object_key: str) -> BinaryIO:
        blob = self._client.bucket(bucket_name).blob(object_key)
        self._logger.debug(
            "Opening blob for reading",
            extra={"bucket_name": bucket_name, "object_key": object_key},
        )
        return blob.open("rb")

    def upload_object(
        self,
        bucket_name: str,
        object_key: str,
        file_path: str,
        content_type: str | None = None,
        cache_control_enabled: bool = False,
    ) -> None:
        with open(file_path, "rb") as f:
            size = os.fstat(f.fileno()).st_size
            self.write_blob(
                bucket_name,
                object_key,
                f,
                size,
                content_type=content_type,
                cache_control_enabled=cache_control_enabled,
            )

    def write_blob(
        self,
        bucket_name: str,
        object_key: str,
        content: BinaryIO,
        content_length: int,
        content_type: str | None = None,
        cache_control_enabled: bool = False,
    ) -> None:
        self._logger.debug(
            "Writing blob",
            extra={
                "bucket_name": bucket_name,
                "object_key": object_key,
                "content_length": content_length,
            },
        )
        if content_length < 0:
            raise InvalidArgumentError(
                f"content_length must be >= 0, got {content_length}"
            )

        request = UploadRequest(
            location=ObjectLocation(bucket_name=bucket_name, object_key=object_key),
            content_length=content_length,
            content_type=content_type,
            cache_control_enabled=cache_control_enabled,
        )

        data = content.read()
        if len(data) < request.content_length:
            raise InvalidArgumentError(
                f"Stream for '{request.location}' holds {len(data)} bytes, "
                f"expected at least {request.content_length}"
            )

        blob = self._client.bucket(bucket_name).blob(object_key)
        if request.cache_control is not None:
            blob.cache_control = request.cache_control
        if request.content_type is not None:
            blob.content_type = request.content_type

        try:
            with blob.open("wb", ignore_flush=True) as writer:
                writer.write(memoryview(data)[: request.content_length])
        except Exception as e:
            self._logger.exception(
                "Blob write failed",
                extra={
                    "bucket_name": bucket_name,
                    "object_key": object_key,
                    "content_length": content_length,
                },
            )
            raise WriteFailedError(bucket_name, object_key, e) from e

        self._logger.info(
            "Blob written to GCS",
            extra={
                "bucket_name": bucket_name,
                "object_key": object_key,
                "content_length": content_length,
            },
        )


def create_blob_store(
    config: BlobStoreConfig | None = None, logger: logging.Logger | None = None
) -> GcsBlobStore:
    """
    Builds a GcsBlobStore with a freshly authenticated storage client.

    Args:
        config: Blob store configuration. Application Default Credentials are
            used when omitted.
        logger: Logger for blob store events. Defaults to the module logger.

    Returns:
        GcsBlobStore ready to share between callers.

    Raises:
        ConfigurationError: If the storage client cannot be built.
    """
    return GcsBlobStore(get_gcs_client(config or BlobStoreConfig()), logger=logger)
