import random
import time
from threading import Lock
from typing import Any, Callable, List, Optional, Protocol

from webring.clients.sheets_client import SheetsClient
from webring.clients.static_client import StaticSheetsClient
from webring.config.settings import settings
from webring.core.exceptions.exceptions import NoUrlsAvailableError
from webring.utils.log import app_logger

CACHE_TTL_SECONDS = 5 * 60


class RowSource(Protocol):
    def get_rows(self) -> List[List[Any]]:
        ...


def extract_urls(rows: Optional[List[List[Any]]]) -> List[str]:
    """First column of every row, trimmed, with blank cells dropped."""
    urls: List[str] = []
    for row in rows or []:
        if not row or row[0] is None:
            continue
        value = str(row[0]).strip()
        if value:
            urls.append(value)
    return urls


class RingCache:
    """Time-bounded cache of the webring url list with circular navigation.

    The list keeps sheet row order and duplicates. It is replaced wholesale on
    every successful fetch; when a fetch fails the previous list is served
    unchanged until a later refresh succeeds.

    Only one fetch runs at a time. Requests that queue behind an in-flight
    fetch reuse its outcome, the new list or the stale one when it failed,
    instead of calling the source again.
    """

    def __init__(self, source: RowSource,
                 clock: Callable[[], float] = time.monotonic,
                 ttl_seconds: float = CACHE_TTL_SECONDS,
                 rng: Optional[random.Random] = None):
        self.source = source
        self.clock = clock
        self.ttl = ttl_seconds
        self.rng = rng or random.Random()
        self._urls: List[str] = []
        self._last_fetched: Optional[float] = None
        self._lock = Lock()
        # bumped after every fetch attempt, successful or not
        self._generation = 0

    @property
    def last_fetched(self) -> Optional[float]:
        return self._last_fetched

    def is_fresh(self) -> bool:
        if not self._urls or self._last_fetched is None:
            return False
        return self.clock() - self._last_fetched < self.ttl

    def refresh(self) -> List[str]:
        """Return the url list, fetching it first when the cache is stale.

        Never raises on source failure: the error is logged and the current
        (possibly empty) list is returned.
        """
        seen_generation = self._generation
        with self._lock:
            # a fetch completed while this call waited for the lock
            if self._generation != seen_generation or self.is_fresh():
                return list(self._urls)

            try:
                rows = self.source.get_rows()
            except Exception as e:
                self._generation += 1
                app_logger.error("ring.refresh.failed", exc_type=type(e).__name__, error=str(e),
                                 cached=len(self._urls))
                return list(self._urls)

            urls = extract_urls(rows)
            self._urls = urls
            self._last_fetched = self.clock()
            self._generation += 1
            if urls:
                app_logger.info("ring.refresh.fetched", count=len(urls))
            else:
                app_logger.warning("ring.refresh.empty")
            return list(urls)

    def _require_urls(self) -> List[str]:
        urls = self.refresh()
        if not urls:
            raise NoUrlsAvailableError()
        return urls

    def next_url(self, current: str) -> str:
        """url after `current`, wrapping to the head; unknown `current` gives the head."""
        urls = self._require_urls()
        try:
            index = urls.index(current)
        except ValueError:
            return urls[0]
        return urls[(index + 1) % len(urls)]

    def previous_url(self, current: str) -> str:
        """url before `current`, wrapping to the tail; unknown `current` gives the tail."""
        urls = self._require_urls()
        try:
            index = urls.index(current)
        except ValueError:
            return urls[-1]
        return urls[(index - 1 + len(urls)) % len(urls)]

    def random_url(self) -> str:
        urls = self._require_urls()
        return self.rng.choice(urls)

    def list_urls(self) -> List[str]:
        # an empty ring is a valid listing, unlike navigation
        return self.refresh()


def build_source() -> RowSource:
    """Data source chosen from settings: the static mock list or Google Sheets."""
    if settings.WEBRING_MOCK_MODE:
        return StaticSheetsClient(settings.mock_urls())

    return SheetsClient(
        api_key=settings.GOOGLE_API_KEY,
        spreadsheet_id=settings.GOOGLE_SHEET_ID,
        range_selector=settings.SHEET_RANGE,
        timeout=settings.SHEETS_TIMEOUT,
        max_retries=settings.SHEETS_MAX_RETRIES,
    )


# process-wide instance, created on first use
_ring_cache: Optional[RingCache] = None


def get_ring_cache() -> RingCache:
    global _ring_cache
    if _ring_cache is None:
        _ring_cache = RingCache(build_source())
    return _ring_cache


def close_ring_cache() -> None:
    global _ring_cache
    if _ring_cache is not None:
        close = getattr(_ring_cache.source, 'close', None)
        if close:
            close()
        _ring_cache = None
