"""Template resolution against the cached bucket listing."""

import time
from collections.abc import Iterable
from datetime import datetime

from ..ports import CachePort, ClockPort, LoggerPort
from .bucket import BucketSource
from .cache import ObjectCache
from .deadline import Deadline
from .errors import ConfigurationError, NotFoundError
from .models import ObjectHandle, RefreshResult, TemplateContent
from .paths import expand, normalize_name


class TemplateResolver:
    """Resolve template names to stored objects.

    A name is expanded into candidate keys using the search path. The first
    candidate present in the cache wins. When none is cached the whole bucket
    is listed once into the cache and the candidates are checked again.
    Misses are not cached, so a later miss lists the bucket again unless it
    falls within ``refresh_interval`` seconds of the previous listing.
    """

    def __init__(
        self,
        source: BucketSource,
        clock: ClockPort,
        logger: LoggerPort,
        cache: CachePort | None = None,
        search_path: Iterable[str] = (),
        refresh_interval: float = 0.0,
    ):
        self.source = source
        self.clock = clock
        self.logger = logger
        self.cache = cache if cache is not None else ObjectCache()
        self.search_path = tuple(search_path)
        self.refresh_interval = refresh_interval

    def candidates(self, name: str) -> list[str]:
        """Candidate keys for a template name, in priority order."""
        return expand(normalize_name(name), self.search_path)

    def _lookup(self, candidates: list[str]) -> ObjectHandle | None:
        for key in candidates:
            handle = self.cache.get(key)
            if handle is not None:
                return handle
        return None

    def _recently_refreshed(self) -> bool:
        if self.refresh_interval <= 0:
            return False
        elapsed = self.cache.seconds_since_refresh()
        return elapsed is not None and elapsed < self.refresh_interval

    def resolve(self, name: str, deadline: Deadline | None = None) -> ObjectHandle | None:
        """Return the handle for ``name``, or None if nothing matches."""
        name = normalize_name(name)
        if not name:
            return None
        candidates = expand(name, self.search_path)

        seen_generation = self.cache.generation
        handle = self._lookup(candidates)
        if handle is not None:
            return handle

        self.source.require_configured()
        if self._recently_refreshed():
            self.logger.debug("Cache miss within refresh interval", template=name)
            return None

        self.logger.debug("Cache miss, refreshing", template=name, candidates=len(candidates))
        self._refresh(deadline, seen_generation)
        handle = self._lookup(candidates)
        if handle is None:
            self.logger.info("Template not found", template=name, candidates=",".join(candidates))
        return handle

    def exists(self, name: str, deadline: Deadline | None = None) -> bool:
        handle = self.resolve(name, deadline)
        return handle is not None and handle.exists()

    def modified_time(self, name: str, deadline: Deadline | None = None) -> datetime | None:
        """Last-modified time of the template, or None when it is not found.

        Falls back to the current time when the store gave no timestamp.
        """
        handle = self.resolve(name, deadline)
        if handle is None:
            return None
        return handle.last_modified() or self.clock.now()

    def content(self, name: str, deadline: Deadline | None = None) -> TemplateContent:
        """Fetch the template's bytes and last-modified time.

        Raises:
            NotFoundError: empty name, or no stored object matches.
            ConfigurationError: no bucket configured.
            TransportError: the store call failed.
            DeadlineExceededError: the deadline passed before the fetch.
        """
        name = normalize_name(name)
        if not name:
            raise NotFoundError("no path specified")
        if not self.source.configured:
            raise ConfigurationError("no bucket configured")

        handle = self.resolve(name, deadline)
        if handle is None or not handle.exists():
            raise NotFoundError(f"object ({name}) not found")

        if deadline is not None:
            deadline.check(f"fetching {handle.key}")
        start = time.monotonic()
        try:
            data = handle.get_bytes()
        except NotFoundError as e:
            raise NotFoundError(f"object ({name}) not found") from e
        self.logger.log_operation(
            op="content",
            key=handle.key,
            durations={"fetch": time.monotonic() - start},
            size=len(data),
        )
        return TemplateContent(
            name=name,
            key=handle.key,
            data=data,
            last_modified=handle.last_modified() or self.clock.now(),
        )

    def refresh(self, deadline: Deadline | None = None) -> int:
        """Force a full refresh and return the number of cached keys."""
        self.source.require_configured()
        self._refresh(deadline)
        return len(self.cache.keys())

    def _refresh(self, deadline: Deadline | None, seen_generation: int | None = None) -> None:
        start = time.monotonic()
        try:
            result = self.cache.refresh_all(self.source, deadline, seen_generation)
        except Exception as e:
            self.logger.warning("Cache refresh failed", bucket=self.source.bucket_name, error=str(e))
            raise
        if result is RefreshResult.LISTED:
            self.logger.log_operation(
                op="refresh",
                key=self.source.bucket_name or "",
                durations={"total": time.monotonic() - start},
                objects=len(self.cache.keys()),
            )
