"""Durable local key/value storage (JSON file) and the persisted selection/page state."""
import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional

from artpager.config import LOCAL_STORE_PATH
from artpager.models.artwork import Artwork, artwork_from_dict, artwork_to_dict

logger = logging.getLogger(__name__)

SELECTED_ROWS_KEY = "selectedRows"
CURRENT_PAGE_KEY = "currentPage"


class LocalStore:
    """String values by key in one JSON file, read and written synchronously.

    Every write rewrites the whole file. A missing or corrupt file reads as empty.
    """

    def __init__(self, path: Path = LOCAL_STORE_PATH) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Local store %s unreadable, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)


class SelectionStore:
    """Load/save of the selected rows and current page on top of a LocalStore."""

    def __init__(self, storage: LocalStore) -> None:
        self._storage = storage

    def load_selection(self) -> Dict[str, Artwork]:
        """Return selected rows keyed by identifier; empty if nothing usable is stored."""
        raw = self._storage.get_item(SELECTED_ROWS_KEY)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Stored selection is not valid JSON, starting empty: %s", e)
            return {}
        if not isinstance(data, dict):
            return {}
        out: Dict[str, Artwork] = {}
        for key, item in data.items():
            try:
                artwork = artwork_from_dict(item)
            except (KeyError, TypeError, AttributeError):
                continue
            out[str(key)] = artwork
        return out

    def save_selection(self, selection: Dict[str, Artwork]) -> None:
        data = {key: artwork_to_dict(a) for key, a in selection.items()}
        self._storage.set_item(SELECTED_ROWS_KEY, json.dumps(data))

    def load_current_page(self) -> int:
        """Stored page number, or 1 when missing or not a positive integer."""
        raw = self._storage.get_item(CURRENT_PAGE_KEY)
        try:
            page = int(raw or "1", 10)
        except ValueError:
            logger.warning("Stored page %r is not a number, using page 1", raw)
            return 1
        return page if page >= 1 else 1

    def save_current_page(self, page: int) -> None:
        self._storage.set_item(CURRENT_PAGE_KEY, str(page))
