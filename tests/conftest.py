"""In-memory stand-ins for the google-cloud-storage client surface."""

import io
import threading

import pytest
from google.api_core.exceptions import NotFound

from gcs_blobstore import GcsBlobStore


class FakeBlobReader:
    """Defers the existence check to the first read, like BlobReader."""

    def __init__(self, storage, bucket_name, object_key):
        self._storage = storage
        self._location = (bucket_name, object_key)
        self._stream = None

    def read(self, size=-1):
        if self._stream is None:
            try:
                data, _ = self._storage.objects[self._location]
            except KeyError:
                raise NotFound(f"No such object: {self._location[0]}/{self._location[1]}")
            self._stream = io.BytesIO(data)
        return self._stream.read(size)

    def close(self):
        pass


class FakeBlobWriter:
    def __init__(self, blob, fail_with=None):
        self._blob = blob
        self._buffer = io.BytesIO()
        self._fail_with = fail_with
        self.closed = False

    def write(self, data):
        if self._fail_with is not None:
            raise self._fail_with
        return self._buffer.write(data)

    def close(self):
        self.closed = True
        if self._fail_with is None:
            self._blob.commit(self._buffer.getvalue())

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class FakeBlob:
    def __init__(self, storage, bucket_name, name):
        self._storage = storage
        self.bucket_name = bucket_name
        self.name = name
        self.cache_control = None
        self.content_type = None

    def open(self, mode="r", **kwargs):
        self._storage.record_open(self.bucket_name, self.name, mode, kwargs)
        if mode == "rb":
            return FakeBlobReader(self._storage, self.bucket_name, self.name)
        if mode == "wb":
            writer = FakeBlobWriter(self, self._storage.fail_writes_with)
            self._storage.writers.append(writer)
            return writer
        raise ValueError(f"unsupported mode {mode!r}")

    def commit(self, data):
        metadata = {"cache_control": self.cache_control, "content_type": self.content_type}
        with self._storage.lock:
            self._storage.objects[(self.bucket_name, self.name)] = (data, metadata)


class FakeBucket:
    def __init__(self, storage, name):
        self._storage = storage
        self.name = name

    def blob(self, blob_name):
        return FakeBlob(self._storage, self.name, blob_name)


class FakeStorageClient:
    """Thread-safe in-memory storage.Client replacement."""

    def __init__(self):
        self.lock = threading.Lock()
        self.objects = {}
        self.opens = []
        self.writers = []
        self.fail_writes_with = None

    def bucket(self, bucket_name):
        return FakeBucket(self, bucket_name)

    def record_open(self, bucket_name, object_key, mode, kwargs):
        with self.lock:
            self.opens.append((bucket_name, object_key, mode, kwargs))

    def put(self, bucket_name, object_key, data):
        self.objects[(bucket_name, object_key)] = (data, {})

    def metadata(self, bucket_name, object_key):
        return self.objects[(bucket_name, object_key)][1]


@pytest.fixture()
def fake_client():
    return FakeStorageClient()


@pytest.fixture()
def blob_store(fake_client):
    return GcsBlobStore(fake_client)
