"""
In-memory cache of compatibility results.

Entries are keyed by ``"{user_id}:{category}:{listing_id}"`` and expire
after a per-entry TTL. Expiry is lazy: an expired entry is evicted when it
is next looked up, or by ``cleanup`` (which can run on a background timer).
Every operation holds one re-entrant lock, so a cache instance can be shared
by concurrent scoring requests.
"""

import threading
import time
from collections.abc import Callable
from typing import NamedTuple, Optional

from compat_engine.data.models import CompatibilityResult
from compat_engine.utils.constants import DEFAULT_CACHE_TTL_MS
from compat_engine.utils.logger import LoggerMixin

Clock = Callable[[], int]


def _system_clock_ms() -> int:
    return int(time.time() * 1000)


def make_key(user_id: str, listing_id: str, category: str) -> str:
    """Stable cache key for one user, listing and category."""
    return f"{user_id}:{category}:{listing_id}"


class CacheEntry(NamedTuple):
    """Cached result with its expiry and the parts of its key."""

    result: CompatibilityResult
    expires_at: int  # epoch milliseconds
    user_id: str
    category: str
    listing_id: str


class CompatibilityCache(LoggerMixin):
    """
    Thread-safe TTL cache for compatibility results.

    Construct one per process and pass it to the engine; tests build an
    isolated instance with a fake clock.
    """

    def __init__(
        self,
        default_ttl_ms: int = DEFAULT_CACHE_TTL_MS,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the cache.

        Args:
            default_ttl_ms: TTL applied when ``set`` is called without one
            clock: Callable returning the current time in epoch milliseconds
        """
        self.default_ttl_ms = default_ttl_ms
        self._clock = clock or _system_clock_ms
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._cleanup_thread: Optional[threading.Thread] = None
        self._cleanup_stop = threading.Event()

    def _is_live(self, entry: CacheEntry, now: int) -> bool:
        return now < entry.expires_at

    def get(self, user_id: str, listing_id: str, category: str) -> Optional[CompatibilityResult]:
        """
        Look up a cached result.

        Returns:
            The cached object itself, or None when absent or expired (an
            expired entry is evicted)
        """
        key = make_key(user_id, listing_id, category)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not self._is_live(entry, self._clock()):
                del self._entries[key]
                return None
            return entry.result

    def set(self, result: CompatibilityResult, ttl_ms: Optional[int] = None) -> None:
        """
        Store a result under the key taken from the result itself.

        Results missing a user id, listing id or category are refused with a
        warning.
        """
        if not result.cache_key_complete:
            self.logger.warning(
                "Cannot cache compatibility result without userId, listingId, and category"
            )
            return

        ttl = self.default_ttl_ms if ttl_ms is None else ttl_ms
        key = make_key(result.user_id, result.listing_id, result.category)
        with self._lock:
            self._entries[key] = CacheEntry(
                result=result,
                expires_at=self._clock() + ttl,
                user_id=result.user_id,
                category=result.category,
                listing_id=result.listing_id,
            )

    def has(self, user_id: str, listing_id: str, category: str) -> bool:
        """Whether a live entry exists (does not evict)."""
        key = make_key(user_id, listing_id, category)
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and self._is_live(entry, self._clock())

    def invalidate(self, user_id: str, listing_id: str, category: str) -> None:
        """Remove one entry, if present."""
        with self._lock:
            self._entries.pop(make_key(user_id, listing_id, category), None)

    def invalidate_for_user(self, user_id: str) -> int:
        """Remove every entry belonging to a user; returns the number removed."""
        return self._invalidate_where(lambda e: e.user_id == user_id)

    def invalidate_for_listing(self, listing_id: str) -> int:
        """
        Remove every entry for a listing, across users and categories.

        Matches the listing id exactly, so listing "1" never removes
        listing "10".
        """
        return self._invalidate_where(lambda e: e.listing_id == listing_id)

    def _invalidate_where(self, predicate: Callable[[CacheEntry], bool]) -> int:
        with self._lock:
            doomed = [k for k, e in self._entries.items() if predicate(e)]
            for key in doomed:
                del self._entries[key]
        return len(doomed)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        """Number of stored entries, including expired ones not yet evicted."""
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def keys(self) -> list[str]:
        """Snapshot of the stored keys."""
        with self._lock:
            return list(self._entries)

    def cleanup(self) -> int:
        """Evict every expired entry; returns the number evicted."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if not self._is_live(e, now)]
            for key in expired:
                del self._entries[key]

        if expired:
            self.logger.debug(f"Evicted {len(expired)} expired compatibility results")
        return len(expired)

    # ── Periodic maintenance ──────────────────────────────────────────────

    def start_cleanup_timer(self, interval_seconds: float) -> None:
        """Run ``cleanup`` every ``interval_seconds`` on a daemon thread."""
        with self._lock:
            if self._cleanup_thread is not None and self._cleanup_thread.is_alive():
                return
            self._cleanup_stop.clear()
            self._cleanup_thread = threading.Thread(
                target=self._cleanup_loop,
                args=(interval_seconds,),
                name="compat-cache-cleanup",
                daemon=True,
            )
            self._cleanup_thread.start()
        self.logger.debug(f"Cache cleanup timer started ({interval_seconds}s interval)")

    def stop_cleanup_timer(self) -> None:
        """Stop the background cleanup thread, if running."""
        self._cleanup_stop.set()
        thread = self._cleanup_thread
        if thread is not None:
            thread.join(timeout=5)
        self._cleanup_thread = None

    @property
    def cleanup_timer_running(self) -> bool:
        thread = self._cleanup_thread
        return thread is not None and thread.is_alive()

    def _cleanup_loop(self, interval_seconds: float) -> None:
        while not self._cleanup_stop.wait(interval_seconds):
            self.cleanup()
