import threading
import time

DEFAULT_TTL_SECONDS = 300


class ResponseCache:
    """In-process TTL cache for shaped query responses.

    Entries expire a fixed number of seconds after ``set``. There is no
    size bound and no invalidation on write, so a cached response can lag
    behind newly ingested data until it expires.
    """

    def __init__(self, ttl_seconds=DEFAULT_TTL_SECONDS, clock=time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._storage = {}

    def get(self, key):
        with self._lock:
            item = self._storage.get(key)
            if item is None:
                return None
            expires_at, value = item
            if expires_at <= self._clock():
                del self._storage[key]
                return None
            return value

    def set(self, key, value):
        with self._lock:
            self._storage[key] = (self._clock() + self.ttl_seconds, value)

    def delete(self, key):
        with self._lock:
            self._storage.pop(key, None)

    def clear(self):
        with self._lock:
            self._storage.clear()

    def purge_expired(self):
        """Drop entries that have already expired. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, (expires_at, _) in self._storage.items() if expires_at <= now]
            for key in expired:
                del self._storage[key]
            return len(expired)

    def __len__(self):
        with self._lock:
            return len(self._storage)
