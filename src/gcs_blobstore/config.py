"""Blob store configuration."""

import os

from pydantic import BaseModel

from gcs_blobstore.credentials import (
    CredentialsProvider,
    DefaultCredentialsProvider,
    ServiceAccountCredentialsProvider,
)


class BlobStoreConfig(BaseModel, frozen=True, arbitrary_types_allowed=True):
    """Storage client configuration, fixed once the client is built."""

    credentials_provider: CredentialsProvider | None = None
    credentials_path: str | None = None
    project: str | None = None

    def resolve_credentials_provider(self) -> CredentialsProvider:
        """Explicit provider first, then a key file, then Application Default Credentials."""
        if self.credentials_provider is not None:
            return self.credentials_provider
        if self.credentials_path:
            return ServiceAccountCredentialsProvider(self.credentials_path)
        return DefaultCredentialsProvider()


def load_config() -> BlobStoreConfig:
    """Loads configuration from environment variables."""
    return BlobStoreConfig(
        project=os.getenv("GCS_PROJECT") or None,
        credentials_path=os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or None,
    )
