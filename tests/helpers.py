"""Fakes shared by the s3templates tests."""

import threading
from datetime import UTC, datetime

from s3templates.ports import ObjectHead

FIXED_NOW = datetime(2030, 1, 1, 12, 0, tzinfo=UTC)
STORED_AT = datetime(2024, 5, 17, 8, 30, tzinfo=UTC)
BUCKET = "test-templates"


class FakeClock:
    def __init__(self, now: datetime = FIXED_NOW):
        self.current = now

    def now(self) -> datetime:
        return self.current


class FakeHandle:
    """Minimal ObjectHandle for seeding caches directly."""

    def __init__(self, key, data=b"", modified=STORED_AT, exists=True):
        self.key = key
        self.data = data
        self.modified = modified
        self.present = exists

    def exists(self):
        return self.present

    def last_modified(self):
        return self.modified

    def get_bytes(self):
        return self.data


class FakeStorage:
    """In-memory StoragePort with call counters.

    ``listings`` counts full listings (first pages only). Setting ``gate``
    blocks every listing until the event is set; ``started`` is set as soon
    as a listing begins.
    """

    def __init__(self, objects=None, modified=None):
        self.objects = dict(objects or {})
        self.modified = dict(modified or {})
        self.listings = 0
        self.pages = 0
        self.gets = 0
        self.list_error = None
        self.gate = None
        self.started = threading.Event()
        self._lock = threading.Lock()

    def list_objects(self, bucket, prefix="", max_keys=1000, continuation_token=None):
        with self._lock:
            self.pages += 1
            if continuation_token is None:
                self.listings += 1
        self.started.set()
        if self.gate is not None:
            self.gate.wait(5)
        if self.list_error is not None:
            raise self.list_error

        keys = sorted(k for k in self.objects if k.startswith(prefix))
        start = int(continuation_token or 0)
        end = start + max_keys
        return {
            "objects": [
                {"key": key, "size": len(self.objects[key]), "last_modified": self.modified.get(key)}
                for key in keys[start:end]
            ],
            "is_truncated": end < len(keys),
            "next_continuation_token": str(end) if end < len(keys) else None,
        }

    def head(self, bucket, key):
        if key not in self.objects:
            return None
        return ObjectHead(key=key, size=len(self.objects[key]), last_modified=self.modified.get(key))

    def get(self, bucket, key):
        self.gets += 1
        return self.objects.get(key)
