import logging

from google.cloud import storage

from gcs_blobstore.config import BlobStoreConfig
from gcs_blobstore.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_gcs_client(config: BlobStoreConfig) -> storage.Client:
    """
    Initialize and return an authenticated Google Cloud Storage client.

    Credentials come from the configured provider, a service account key file,
    or Application Default Credentials, in that order.

    Args:
        config: Blob store configuration.

    Returns:
        storage.Client: Configured storage client.

    Raises:
        ConfigurationError: If credentials cannot be resolved or the client
            cannot be constructed.
    """
    provider = config.resolve_credentials_provider()
    kwargs: dict = {}
    if config.project:
        kwargs["project"] = config.project

    try:
        kwargs["credentials"] = provider.get_credentials()
        return storage.Client(**kwargs)
    except Exception as e:
        logger.exception(
            "GCS Client Initialization Failed",
            extra={
                "project": config.project,
                "credentials_provider": type(provider).__name__,
            },
        )
        raise ConfigurationError(str(e), e) from e
