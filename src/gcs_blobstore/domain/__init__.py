from gcs_blobstore.domain.models import (
    CACHE_CONTROL_PARAMS,
    ObjectLocation,
    UploadRequest,
)

__all__ = ["CACHE_CONTROL_PARAMS", "ObjectLocation", "UploadRequest"]
