from gcs_blobstore.infrastructure.gcs_storage import GcsBlobStore, create_blob_store
from gcs_blobstore.infrastructure.interfaces import BlobStore

__all__ = ["BlobStore", "GcsBlobStore", "create_blob_store"]
