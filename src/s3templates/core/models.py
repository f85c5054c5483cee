"""Data models for template resolution."""

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ObjectHandle(Protocol):
    """Narrow view of a stored object."""

    @property
    def key(self) -> str:
        ...

    def exists(self) -> bool:
        """Check whether the object is still present in the store."""
        ...

    def last_modified(self) -> datetime | None:
        """Last-modified timestamp, if the store supplied one."""
        ...

    def get_bytes(self) -> bytes:
        """Fetch the object's content.

        Raises NotFoundError if the object has been deleted.
        """
        ...


class RefreshResult(enum.Enum):
    """How a call to refresh the cache was satisfied."""

    LISTED = "listed"
    JOINED = "joined"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class TemplateContent:
    """Bytes of a resolved template plus the metadata the engine needs."""

    name: str
    key: str
    data: bytes
    last_modified: datetime

    def text(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding)
