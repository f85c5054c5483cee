"""In-memory object handle cache with single-flight refresh."""

import threading
import time
from collections.abc import Callable

from ..ports.cache import ObjectSource
from .deadline import Deadline
from .errors import DeadlineExceededError
from .models import ObjectHandle, RefreshResult

_WAIT_POLL_SECONDS = 0.05


class _Refresh:
    """State of one in-flight full listing, shared with its waiters."""

    __slots__ = ("done", "error")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.error: BaseException | None = None


class ObjectCache:
    """Map storage keys to object handles.

    The entry lock guards single reads and writes only. Full refreshes are
    coordinated separately so that concurrent misses share one listing, and
    the listing itself runs without holding the entry lock.
    """

    def __init__(self, timer: Callable[[], float] = time.monotonic):
        self._timer = timer
        self._entries: dict[str, ObjectHandle] = {}
        self._lock = threading.Lock()
        self._refresh_lock = threading.Lock()
        self._inflight: _Refresh | None = None
        self._generation = 0
        self._refreshed_at: float | None = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    @property
    def refreshed_at(self) -> float | None:
        with self._lock:
            return self._refreshed_at

    def seconds_since_refresh(self) -> float | None:
        refreshed_at = self.refreshed_at
        if refreshed_at is None:
            return None
        return self._timer() - refreshed_at

    def get(self, key: str) -> ObjectHandle | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, handle: ObjectHandle) -> None:
        with self._lock:
            self._entries[key] = handle

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def refresh_all(
        self,
        source: ObjectSource,
        deadline: Deadline | None = None,
        seen_generation: int | None = None,
    ) -> RefreshResult:
        """Repopulate the cache from a full listing of ``source``.

        Only one listing runs at a time. Callers arriving while a listing is
        in flight wait for it and share its outcome (JOINED), including a
        store failure. When the listing stopped because the leader's own
        deadline ran out, waiters list again under their own deadlines.
        When ``seen_generation`` is older than the current generation a
        refresh has already completed since the caller last looked, so
        nothing is listed (SKIPPED).

        A failed listing leaves existing entries untouched.
        """
        while True:
            with self._refresh_lock:
                if seen_generation is not None and self.generation > seen_generation:
                    return RefreshResult.SKIPPED
                refresh = self._inflight
                leader = refresh is None
                if leader:
                    refresh = self._inflight = _Refresh()

            if leader:
                break
            self._wait(refresh, deadline)
            if isinstance(refresh.error, DeadlineExceededError):
                continue
            if refresh.error is not None:
                raise refresh.error
            return RefreshResult.JOINED

        try:
            fetched: dict[str, ObjectHandle] = {}
            for handle in source.list_all(deadline):
                fetched[handle.key] = handle
            with self._lock:
                self._entries.update(fetched)
                self._generation += 1
                self._refreshed_at = self._timer()
        except BaseException as e:
            refresh.error = e
            raise
        finally:
            with self._refresh_lock:
                self._inflight = None
            refresh.done.set()
        return RefreshResult.LISTED

    @staticmethod
    def _wait(refresh: _Refresh, deadline: Deadline | None) -> None:
        # Poll so that a cancelled deadline is noticed while waiting
        while not refresh.done.wait(None if deadline is None else _WAIT_POLL_SECONDS):
            deadline.check("waiting for cache refresh")
