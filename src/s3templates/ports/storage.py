"""Storage port interface."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class ObjectHead:
    """Metadata returned by a HEAD request."""

    key: str
    size: int
    last_modified: datetime | None
    etag: str | None = None


class StoragePort(Protocol):
    """Port for read-only object store operations."""

    def list_objects(
        self,
        bucket: str,
        prefix: str = "",
        max_keys: int = 1000,
        continuation_token: str | None = None,
    ) -> dict[str, Any]:
        """List one page of objects.

        Returns a dict with "objects" (list of {"key", "size", "last_modified"}),
        "is_truncated" and "next_continuation_token".
        """
        ...

    def head(self, bucket: str, key: str) -> ObjectHead | None:
        """Get object metadata, or None if the object does not exist."""
        ...

    def get(self, bucket: str, key: str) -> bytes | None:
        """Get object content, or None if the object does not exist."""
        ...
