"""Cache port interface."""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Protocol

from ..core.models import ObjectHandle, RefreshResult

if TYPE_CHECKING:
    from ..core.deadline import Deadline


class ObjectSource(Protocol):
    """Anything that can enumerate every stored object."""

    def list_all(self, deadline: "Deadline | None" = None) -> Iterator[ObjectHandle]:
        ...


class CachePort(Protocol):
    """Port for object handle cache operations."""

    @property
    def generation(self) -> int:
        """Number of completed full refreshes."""
        ...

    def get(self, key: str) -> ObjectHandle | None:
        """Get the cached handle for a key."""
        ...

    def put(self, key: str, handle: ObjectHandle) -> None:
        """Store a handle, replacing any existing entry."""
        ...

    def keys(self) -> Iterable[str]:
        """Snapshot of cached keys."""
        ...

    def seconds_since_refresh(self) -> float | None:
        """Seconds since the last completed refresh, or None if never refreshed."""
        ...

    def refresh_all(
        self,
        source: ObjectSource,
        deadline: "Deadline | None" = None,
        seen_generation: int | None = None,
    ) -> RefreshResult:
        """Repopulate the cache from a full listing of the source."""
        ...
