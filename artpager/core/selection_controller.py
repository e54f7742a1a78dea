"""Cross-page row selection over a paginated remote catalog, with deferred auto-select."""
import logging
import math
import threading
from typing import Dict, Iterable, List, Optional

from artpager.config import PAGE_SIZE
from artpager.core.artworks_client import ArtworksClient, CatalogFetchError
from artpager.core.local_store import SelectionStore
from artpager.models.artwork import Artwork, ArtworkId, ArtworkPage

logger = logging.getLogger(__name__)


class SelectionController:
    """Owns the visible page, the selection across all pages and the pending auto-select count.

    Client and store are injected. The selection only ever holds rows that
    came back from some fetch, and is persisted after every mutation
    together with the current page.

    Each fetch takes a sequence token before going to the network; a
    response is applied only if no newer fetch was issued meanwhile, so
    rapid navigation ends on the last page requested rather than the last
    response received. The lock guards state and is never held across the
    network call.
    """

    def __init__(
        self,
        client: ArtworksClient,
        store: SelectionStore,
        page_size: int = PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._client = client
        self._store = store
        self.page_size = page_size
        self._lock = threading.Lock()

        self._records: List[Artwork] = []
        self._selected: Dict[str, Artwork] = {}
        self._current_page = 1
        self._total_records = 0
        self._pending_auto_select = 0
        self._loading = False
        self._popup_open = False
        self._request_seq = 0

    # Lifecycle

    def load(self) -> None:
        """Rehydrate selection and current page from the store."""
        selected = self._store.load_selection()
        page = self._store.load_current_page()
        with self._lock:
            self._selected = selected
            self._current_page = page
        logger.info("Restored %d selected rows, page %d", len(selected), page)

    def _persist(self) -> None:
        self._store.save_selection(self._selected)
        self._store.save_current_page(self._current_page)

    # Fetching

    def fetch_page(self, page: int) -> Optional[ArtworkPage]:
        """Fetch page n and make it the visible page.

        Applies any pending auto-select to the fetched rows. Returns the
        fetched page, or None when a newer fetch superseded this one and the
        response was discarded. If the client raises, nothing changes except
        the loading flag, and the error is re-raised.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        with self._lock:
            self._request_seq += 1
            token = self._request_seq
            self._loading = True

        try:
            result = self._client.fetch_page(page, self.page_size)
        except CatalogFetchError as e:
            logger.error("Error fetching artworks: %s", e)
            raise
        finally:
            with self._lock:
                if token == self._request_seq:
                    self._loading = False

        with self._lock:
            if token != self._request_seq:
                logger.info("Discarding stale response for page %d", page)
                return None
            self._records = list(result.records)
            self._total_records = result.total
            self._current_page = page
            if self._pending_auto_select > 0:
                added = self._apply_auto_select(self._records)
                logger.info(
                    "Auto-selected %d rows on page %d, %d still pending",
                    added,
                    page,
                    self._pending_auto_select,
                )
            self._persist()
        return result

    def _apply_auto_select(self, records: Iterable[Artwork]) -> int:
        """Select rows in returned order, skipping those already selected. Caller holds the lock."""
        added = 0
        for artwork in records:
            if added >= self._pending_auto_select:
                break
            if artwork.key in self._selected:
                continue
            self._selected[artwork.key] = artwork
            added += 1
        self._pending_auto_select -= added
        return added

    def change_page(self, page: int) -> Optional[ArtworkPage]:
        """Paginator navigation."""
        return self.fetch_page(page)

    def refresh(self) -> Optional[ArtworkPage]:
        return self.fetch_page(self.current_page)

    # Selection

    def set_selection(self, visible_selected_ids: Iterable[ArtworkId]) -> List[Artwork]:
        """Reconcile the visible page with the UI's multi-select.

        Each row on the current page is selected if its id is in
        ``visible_selected_ids`` and deselected otherwise. Rows on other pages
        are untouched and ids not on the current page are ignored.
        Returns the resulting visible selection.
        """
        wanted = {str(i) for i in visible_selected_ids}
        with self._lock:
            for artwork in self._records:
                if artwork.key in wanted:
                    self._selected[artwork.key] = artwork
                else:
                    self._selected.pop(artwork.key, None)
            self._store.save_selection(self._selected)
            return [a for a in self._records if a.key in self._selected]

    def request_auto_select(self, count: int) -> Optional[ArtworkPage]:
        """Auto-select the next ``count`` rows, starting with a refetch of the current page.

        Rows the current page cannot satisfy stay pending and are taken from
        the next pages fetched. A count larger than what remains in the
        catalog is not an error; the counter just stays non-zero.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        with self._lock:
            self._pending_auto_select = count
            self._popup_open = False
            page = self._current_page
        logger.info("Auto-select requested for %d rows from page %d", count, page)
        return self.fetch_page(page)

    def toggle_auto_select_popup(self) -> bool:
        with self._lock:
            self._popup_open = not self._popup_open
            return self._popup_open

    def visible_selection(self) -> List[Artwork]:
        """Rows on the current page that are selected, in page order."""
        with self._lock:
            return [a for a in self._records if a.key in self._selected]

    def selected_rows(self) -> List[Artwork]:
        with self._lock:
            return list(self._selected.values())

    # Derived state

    @property
    def records(self) -> List[Artwork]:
        with self._lock:
            return list(self._records)

    @property
    def current_page(self) -> int:
        with self._lock:
            return self._current_page

    @property
    def total_records(self) -> int:
        with self._lock:
            return self._total_records

    @property
    def total_pages(self) -> int:
        with self._lock:
            return math.ceil(self._total_records / self.page_size)

    @property
    def is_loading(self) -> bool:
        with self._lock:
            return self._loading

    @property
    def pending_auto_select(self) -> int:
        with self._lock:
            return self._pending_auto_select

    @property
    def auto_select_popup_open(self) -> bool:
        with self._lock:
            return self._popup_open

    def page_report(self) -> dict:
        """First/last row numbers of the visible page and the total ("{first} to {last} of {total}")."""
        with self._lock:
            offset = (self._current_page - 1) * self.page_size
            count = len(self._records)
            return {
                "first": offset + 1 if count else 0,
                "last": offset + count,
                "total": self._total_records,
            }
