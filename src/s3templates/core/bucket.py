"""Facade over the object store for a single template bucket."""

import threading
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

from ..ports import LoggerPort, StoragePort
from .deadline import Deadline
from .errors import ConfigurationError, NotFoundError, TransportError

# Upper bound on listing pages (1000 keys each) to stop on broken pagination
MAX_LIST_PAGES = 10000


class BucketObject:
    """Handle for one object in the bucket.

    Existence is checked lazily with a HEAD request and remembered; content
    is fetched on every call to ``get_bytes``, which raises NotFoundError
    once the object has been deleted.
    """

    def __init__(self, source: "BucketSource", key: str, last_modified: datetime | None = None):
        self._source = source
        self._key = key
        self._last_modified = last_modified
        self._exists: bool | None = None

    def __repr__(self) -> str:
        return f"BucketObject(bucket={self._source.bucket_name!r}, key={self._key!r})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def uri(self) -> str:
        return f"s3://{self._source.bucket_name}/{self._key}"

    def exists(self) -> bool:
        if self._exists is None:
            head = self._source.storage.head(self._source.bucket_name, self._key)
            self._exists = head is not None
            if head is not None and self._last_modified is None:
                self._last_modified = head.last_modified
        return self._exists

    def last_modified(self) -> datetime | None:
        return self._last_modified

    def get_bytes(self) -> bytes:
        data = self._source.storage.get(self._source.bucket_name, self._key)
        if data is None:
            self._exists = False
            raise NotFoundError(f"object ({self._key}) not found")
        self._exists = True
        return data


class BucketSource:
    """Read-only access to the template bucket.

    The storage adapter is created on first use and reused afterwards.
    """

    def __init__(
        self,
        bucket_name: str | None,
        storage_factory: Callable[[], StoragePort],
        logger: LoggerPort,
        page_size: int = 1000,
    ):
        self._bucket_name = bucket_name or None
        self._storage_factory = storage_factory
        self._storage: StoragePort | None = None
        self._storage_lock = threading.Lock()
        self.logger = logger
        self.page_size = page_size

    @property
    def bucket_name(self) -> str | None:
        return self._bucket_name

    @property
    def configured(self) -> bool:
        return self._bucket_name is not None

    def require_configured(self) -> str:
        if self._bucket_name is None:
            raise ConfigurationError("no bucket configured")
        return self._bucket_name

    @property
    def storage(self) -> StoragePort:
        """Create the storage adapter once, then return the same instance."""
        if self._storage is None:
            with self._storage_lock:
                if self._storage is None:
                    self.require_configured()
                    self.logger.debug("Creating storage client", bucket=self._bucket_name)
                    self._storage = self._storage_factory()
        return self._storage

    def object(self, key: str, last_modified: datetime | None = None) -> BucketObject:
        return BucketObject(self, key, last_modified)

    def list_all(self, deadline: Deadline | None = None) -> Iterator[BucketObject]:
        """Yield a handle for every object in the bucket.

        Pages are followed until the listing is exhausted. A listing that cannot
        be read to the end raises TransportError rather than ending early.
        """
        bucket = self.require_configured()
        storage = self.storage
        token: str | None = None
        for page_number in range(1, MAX_LIST_PAGES + 1):
            if deadline is not None:
                deadline.check("bucket listing")
            response: dict[str, Any] = storage.list_objects(
                bucket=bucket,
                max_keys=self.page_size,
                continuation_token=token,
            )
            for obj in response.get("objects", []):
                yield self.object(obj["key"], obj.get("last_modified"))

            if not response.get("is_truncated"):
                return
            token = response.get("next_continuation_token")
            # Truncated without a token means the store broke pagination
            if not token:
                raise TransportError(
                    f"store error: listing of {bucket} truncated without continuation token "
                    f"after {page_number} pages"
                )
        raise TransportError(f"store error: listing of {bucket} exceeded {MAX_LIST_PAGES} pages")
