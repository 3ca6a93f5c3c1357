from gcs_blobstore.infrastructure.interfaces.storage import BlobStore

__all__ = ["BlobStore"]
