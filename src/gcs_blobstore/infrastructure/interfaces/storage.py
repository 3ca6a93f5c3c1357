"""Abstract interface for blob storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class BlobStore(ABC):
    """Abstract base class for blob storage backends."""

    @abstractmethod
    def read_object_from_path(self, path: str) -> BinaryIO:
        """
        Opens a blob addressed by a full storage path.

        Args:
            path: A path such as ``gs://bucket/dir/file.bin``.

        Returns:
            A lazily consumed binary stream over the blob contents.

        Raises:
            InvalidArgumentError: If the path is malformed.
        """

    @abstractmethod
    def read_object(self, bucket_name: str, object_key: str) -> BinaryIO:
        """
        Opens a blob for reading.

        Args:
            bucket_name: The storage bucket name.
            object_key: The object path/name in storage.

        Returns:
            A lazily consumed binary stream over the blob contents. Each call
            opens a fresh stream.
        """

    @abstractmethod
    def upload_object(
        self,
        bucket_name: str,
        object_key: str,
        file_path: str,
        content_type: str | None = None,
        cache_control_enabled: bool = False,
    ) -> None:
        """
        Uploads a local file to storage.

        Args:
            bucket_name: The storage bucket name.
            object_key: The destination path/name in storage.
            file_path: Path of the local file to upload.
            content_type: MIME type of the file, if known.
            cache_control_enabled: Whether to mark the blob publicly cacheable.

        Raises:
            FileNotFoundError: If the local file does not exist.
            WriteFailedError: If the upload fails.
        """

    @abstractmethod
    def write_blob(
        self,
        bucket_name: str,
        object_key: str,
        content: BinaryIO,
        content_length: int,
        content_type: str | None = None,
        cache_control_enabled: bool = False,
    ) -> None:
        """
        Writes the first ``content_length`` bytes of a stream to storage.

        Args:
            bucket_name: The storage bucket name.
            object_key: The destination path/name in storage.
            content: File-like object containing the data.
            content_length: Number of bytes to write.
            content_type: MIME type of the data, if known.
            cache_control_enabled: Whether to mark the blob publicly cacheable.

        Raises:
            InvalidArgumentError: If the length is negative or the stream is short.
            WriteFailedError: If the write fails.
        """
