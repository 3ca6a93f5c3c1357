"""Credentials providers used to authenticate the storage client."""

from abc import ABC, abstractmethod

import google.auth
from google.auth.credentials import Credentials
from google.oauth2 import service_account


class CredentialsProvider(ABC):
    """Abstract base class for anything able to produce GCP credentials."""

    @abstractmethod
    def get_credentials(self) -> Credentials:
        """
        Resolves credentials for the storage client.

        Returns:
            Credentials usable by google.cloud.storage.Client.

        Raises:
            google.auth.exceptions.DefaultCredentialsError: If nothing resolves.
        """


class DefaultCredentialsProvider(CredentialsProvider):
    """Application Default Credentials (env var, gcloud config, metadata server)."""

    def get_credentials(self) -> Credentials:
        credentials, _ = google.auth.default()
        return credentials


class ServiceAccountCredentialsProvider(CredentialsProvider):
    """Loads a service account key file from disk."""

    def __init__(self, credentials_path: str):
        self._credentials_path = credentials_path

    @property
    def credentials_path(self) -> str:
        return self._credentials_path

    def get_credentials(self) -> Credentials:
        return service_account.Credentials.from_service_account_file(
            self._credentials_path
        )
