"""Custom exceptions for blob store operations."""


class BlobStoreError(Exception):
    """Base exception for all blob store errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ConfigurationError(BlobStoreError):
    """Raised when credentials or the storage client cannot be set up."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(f"Failed to configure storage client: {message}", cause)


class InvalidArgumentError(BlobStoreError, ValueError):
    """Raised when a caller supplies a malformed path, length or stream."""


class WriteFailedError(BlobStoreError):
    """Raised when writing a blob to storage fails."""

    def __init__(
        self, bucket_name: str, object_key: str, cause: Exception | None = None
    ):
        self.bucket_name = bucket_name
        self.object_key = object_key
        super().__init__(
            f"Failed to write 'gs://{bucket_name}/{object_key}' to storage", cause
        )
