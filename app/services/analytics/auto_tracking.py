"""Auto-tracking helpers for UI collaborators.

PageViewTracker records a view whenever the current route changes.
SearchInputTracker waits for input to settle before recording a search.
"""

import threading
from collections.abc import Callable

from loguru import logger

from app.services.analytics.tracking import TrackingService
from settings import SEARCH_DEBOUNCE


class PageViewTracker:
    """Records a page view on every route change."""

    def __init__(self, tracking: TrackingService):
        self._tracking = tracking
        self._current: str | None = None

    @property
    def current_path(self) -> str | None:
        return self._current

    def navigate(self, path: str | None) -> bool:
        """Notify of the current path. Returns True if a view was recorded."""
        if not path or path == self._current:
            return False
        self._current = path
        self._tracking.track_page_view(path)
        return True


class SearchInputTracker:
    """Debounced search tracking.

    Each ``on_input`` call restarts the timer; when input has been idle for
    ``debounce`` seconds the trimmed text is recorded together with
    ``count_results(text)``. ``close`` cancels anything pending.
    """

    def __init__(
        self,
        tracking: TrackingService,
        count_results: Callable[[str], int],
        debounce: float = SEARCH_DEBOUNCE,
    ):
        self._tracking = tracking
        self._count_results = count_results
        self._debounce = debounce
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: str | None = None
        self._closed = False

    @property
    def pending(self) -> str | None:
        return self._pending

    def on_input(self, text: str | None) -> None:
        with self._lock:
            if self._closed:
                return
            self._cancel_timer()
            self._pending = text
            self._timer = threading.Timer(self._debounce, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> None:
        """Record the pending search now instead of waiting for the timer."""
        with self._lock:
            self._cancel_timer()
        self._fire()

    def close(self) -> None:
        """Cancel any pending search (component teardown)."""
        with self._lock:
            self._closed = True
            self._cancel_timer()
            self._pending = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        with self._lock:
            text, self._pending = self._pending, None
            self._timer = None

        query = (text or "").strip()
        if not query:
            return

        try:
            count = self._count_results(query)
        except Exception as e:
            logger.warning("Result count unavailable for search: {}", e)
            return
        self._tracking.track_search_query(query, count)
