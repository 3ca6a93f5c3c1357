"""Domain models for blob store operations."""

from pydantic import BaseModel, Field

from gcs_blobstore.exceptions import InvalidArgumentError

CACHE_CONTROL_PARAMS = "max-age=3600, public"


class ObjectLocation(BaseModel, frozen=True):
    """A blob address inside a bucket."""

    bucket_name: str
    object_key: str

    @classmethod
    def from_path(cls, path: str) -> "ObjectLocation":
        """
        Parses a storage path such as ``gs://bucket/dir/file.bin``.

        Segment 2 of the slash-split path is the bucket; segments 3 onward,
        rejoined with "/", form the object key.

        Raises:
            InvalidArgumentError: If the path has fewer than four segments or
                the bucket or key is empty.
        """
        parts = path.split("/")
        if len(parts) < 4:
            raise InvalidArgumentError(
                f"Storage path '{path}' must look like 'gs://bucket/key'"
            )

        bucket_name = parts[2]
        object_key = "/".join(parts[3:])
        if not bucket_name or not object_key:
            raise InvalidArgumentError(
                f"Storage path '{path}' has an empty bucket or object key"
            )
        return cls(bucket_name=bucket_name, object_key=object_key)

    def __str__(self) -> str:
        return f"gs://{self.bucket_name}/{self.object_key}"


class UploadRequest(BaseModel, frozen=True):
    """A single blob write, alive only for the duration of the call."""

    location: ObjectLocation
    content_length: int = Field(ge=0)
    content_type: str | None = None
    cache_control_enabled: bool = False

    @property
    def cache_control(self) -> str | None:
        return CACHE_CONTROL_PARAMS if self.cache_control_enabled else None
