from gcs_blobstore.config import BlobStoreConfig, load_config
from gcs_blobstore.credentials import (
    CredentialsProvider,
    DefaultCredentialsProvider,
    ServiceAccountCredentialsProvider,
)
from gcs_blobstore.domain import CACHE_CONTROL_PARAMS, ObjectLocation, UploadRequest
from gcs_blobstore.exceptions import (
    BlobStoreError,
    ConfigurationError,
    InvalidArgumentError,
    WriteFailedError,
)
from gcs_blobstore.gcs import get_gcs_client
from gcs_blobstore.infrastructure import BlobStore, GcsBlobStore, create_blob_store
from gcs_blobstore.logging import setup_logging

__all__ = [
    "setup_logging",
    "BlobStoreConfig",
    "load_config",
    "CredentialsProvider",
    "DefaultCredentialsProvider",
    "ServiceAccountCredentialsProvider",
    "CACHE_CONTROL_PARAMS",
    "ObjectLocation",
    "UploadRequest",
    "BlobStoreError",
    "ConfigurationError",
    "InvalidArgumentError",
    "WriteFailedError",
    "get_gcs_client",
    "BlobStore",
    "GcsBlobStore",
    "create_blob_store",
]
